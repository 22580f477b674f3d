"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import casing
from . import checks
from . import numbers
from . import segments
from . import pipelines
from .casing import *
from .checks import *
from .numbers import *
from .segments import *
from .core import (
    StringOpsError,
    InvalidArgumentError,
    UnknownOperationError,
    PipelineConfigError
)
from .entities import Text
from .pipelines import Pipeline, profile

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'casing',
    'checks',
    'numbers',
    'segments',
    'pipelines',
    'Text',
    'Pipeline',
    'profile',
    'StringOpsError',
    'InvalidArgumentError',
    'UnknownOperationError',
    'PipelineConfigError',
    *casing.__all__,
    *checks.__all__,
    *numbers.__all__,
    *segments.__all__
]
