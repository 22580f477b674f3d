import unittest
from stringops.core import (
    chain_operations,
    requires_string,
    InvalidArgumentError,
    StringOpsError
)

class TestChainOperations(unittest.TestCase):
    def test_chain_operations(self):
        result = chain_operations('  hi ', [str.strip, str.upper])
        self.assertEqual(result, 'HI')

    def test_no_operations(self):
        result = chain_operations('hi', [])
        self.assertEqual(result, 'hi')

class TestRequiresString(unittest.TestCase):
    def test_passes_strings_through(self):
        shout = requires_string(lambda text: text + '!')
        self.assertEqual(shout('hey'), 'hey!')

    def test_rejects_other_types(self):
        @requires_string
        def shout(text):
            return text + '!'

        for value in [None, 1, b'bytes', ['a']]:
            with self.assertRaises(InvalidArgumentError):
                shout(value)

    def test_error_hierarchy(self):
        self.assertTrue(issubclass(InvalidArgumentError, StringOpsError))
        self.assertTrue(issubclass(InvalidArgumentError, TypeError))

class TestUnknownOperationError(unittest.TestCase):
    def test_message_not_quoted(self):
        from stringops.core import UnknownOperationError
        error = UnknownOperationError('shout, whisper')
        self.assertEqual(str(error), 'shout, whisper')
        self.assertIsInstance(error, LookupError)
