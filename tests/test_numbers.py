import unittest
from stringops import numbers

class TestToCurrency(unittest.TestCase):
    def test_to_currency(self):
        result = numbers.to_currency('1234567.89')
        self.assertEqual(result, '1,234,567.89')

    def test_no_grouping_needed(self):
        self.assertEqual(numbers.to_currency('999'), '999')
        self.assertEqual(numbers.to_currency('100'), '100')

    def test_group_sizes(self):
        self.assertEqual(numbers.to_currency('1000'), '1,000')
        self.assertEqual(numbers.to_currency('12345'), '12,345')
        self.assertEqual(numbers.to_currency('123456'), '123,456')

    def test_empty_fraction_dropped(self):
        result = numbers.to_currency('1000.')
        self.assertEqual(result, '1,000')

    def test_empty(self):
        result = numbers.to_currency('')
        self.assertEqual(result, '')

class TestFromCurrency(unittest.TestCase):
    def test_from_currency(self):
        result = numbers.from_currency('1,234,567.89')
        self.assertEqual(result, '1234567.89')

    def test_consecutive_commas(self):
        result = numbers.from_currency('1,,000')
        self.assertEqual(result, '1000')

    def test_round_trip(self):
        for text in ['1', '12', '1234', '1234567', '1234567.89', '0.5']:
            self.assertEqual(numbers.from_currency(numbers.to_currency(text)), text)

class TestNumberWords(unittest.TestCase):
    def test_leading_digit(self):
        result = numbers.number_words('5')
        self.assertEqual(result, 'five')

    def test_digit_not_at_start(self):
        result = numbers.number_words('a5')
        self.assertEqual(result, 'a five')

    def test_mixed(self):
        result = numbers.number_words('a1b22')
        self.assertEqual(result, 'a one b two two')

    def test_all_digits(self):
        result = numbers.number_words('0123456789')
        self.assertEqual(result, 'zero one two three four five six seven eight nine')

    def test_no_digits(self):
        result = numbers.number_words('none here')
        self.assertEqual(result, 'none here')

    def test_every_digit_has_a_word(self):
        from stringops.patterns import DIGIT_WORDS
        self.assertEqual(sorted(DIGIT_WORDS), list('0123456789'))

class TestIsDigit(unittest.TestCase):
    def test_single_digit(self):
        self.assertTrue(numbers.is_digit('7'))

    def test_not_single_digit(self):
        self.assertFalse(numbers.is_digit('77'))
        self.assertFalse(numbers.is_digit(''))
        self.assertFalse(numbers.is_digit('a'))
        self.assertFalse(numbers.is_digit('7\n'))
