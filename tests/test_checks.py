import unittest
from stringops import checks

class TestHasVowels(unittest.TestCase):
    def test_has_vowels(self):
        self.assertTrue(checks.has_vowels('Ink'))
        self.assertTrue(checks.has_vowels('SKY HIGH'))

    def test_no_vowels(self):
        self.assertFalse(checks.has_vowels(''))
        self.assertFalse(checks.has_vowels('xyz'))

class TestIsQuestion(unittest.TestCase):
    def test_is_question(self):
        result = checks.is_question('  Are we there yet?  ')
        self.assertEqual(result, True)

    def test_not_question(self):
        self.assertFalse(checks.is_question('Stop.'))
        self.assertFalse(checks.is_question('Why? Because.'))
        self.assertFalse(checks.is_question(''))

class TestDoubleCheck(unittest.TestCase):
    def test_double_check(self):
        self.assertTrue(checks.double_check('hello'))
        self.assertTrue(checks.double_check('a  b'))

    def test_repeated_line_breaks(self):
        self.assertTrue(checks.double_check('\n\n'))
        self.assertTrue(checks.double_check('\r\r'))
        self.assertTrue(checks.double_check('end\n\n'))
        self.assertFalse(checks.double_check('a\nb\r\n'))

    def test_no_double(self):
        self.assertFalse(checks.double_check('world'))
        self.assertFalse(checks.double_check(''))
