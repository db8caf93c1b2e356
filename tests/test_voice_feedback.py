"""
Tests de las frases de narración (sin motor de voz).
"""
import math
import unittest

from hand_math.core.capture import CalculationRecord
from hand_math.voice.feedback import describe_calculation


class TestDescribeCalculation(unittest.TestCase):

    def test_english_sentence(self):
        record = CalculationRecord(3, "+", 2, 5)
        self.assertEqual(describe_calculation(record, 'en'), "3 plus 2 equals 5")

    def test_spanish_sentence(self):
        record = CalculationRecord(4, "×", 5, 20)
        self.assertEqual(describe_calculation(record, 'es'), "4 por 5 igual a 20")

    def test_negative_result(self):
        record = CalculationRecord(1, "−", 4, -3)
        self.assertEqual(describe_calculation(record, 'en'), "1 minus 4 equals -3")

    def test_division_by_zero(self):
        record = CalculationRecord(6, "÷", 0, math.nan)
        self.assertEqual(describe_calculation(record, 'en'), "Cannot divide 6 by zero")
        self.assertEqual(describe_calculation(record, 'es'), "No se puede dividir 6 entre cero")

    def test_decimal_results(self):
        self.assertEqual(
            describe_calculation(CalculationRecord(5, "÷", 2, 2.5), 'en'),
            "5 divided by 2 equals 2 point 5",
        )
        self.assertEqual(
            describe_calculation(CalculationRecord(1, "÷", 3, 1 / 3), 'es'),
            "1 dividido entre 3 igual a 0 coma 33",
        )

    def test_integral_float_result(self):
        record = CalculationRecord(4, "÷", 2, 2.0)
        self.assertEqual(describe_calculation(record, 'en'), "4 divided by 2 equals 2")


if __name__ == '__main__':
    unittest.main()
