"""
Tests del evaluador aritmético y del formateo de resultados.
"""
import math
import unittest

from hand_math.core.evaluator import evaluate, format_result, is_division_by_zero


class TestEvaluate(unittest.TestCase):

    def test_basic_operations(self):
        self.assertEqual(evaluate(3, "+", 2), 5)
        self.assertEqual(evaluate(3, "−", 5), -2)
        self.assertEqual(evaluate(4, "×", 5), 20)
        self.assertEqual(evaluate(4, "÷", 2), 2.0)

    def test_non_integral_division(self):
        self.assertEqual(evaluate(7, "÷", 2), 3.5)

    def test_division_by_zero_is_nan(self):
        result = evaluate(6, "÷", 0)
        self.assertTrue(math.isnan(result))
        self.assertTrue(is_division_by_zero(result))

    def test_unknown_operator_is_fatal(self):
        with self.assertRaises(AssertionError):
            evaluate(1, "%", 2)
        # El guion ASCII no pertenece al conjunto cerrado
        with self.assertRaises(AssertionError):
            evaluate(1, "-", 2)


class TestFormatResult(unittest.TestCase):

    def test_formats(self):
        self.assertEqual(format_result(5), "5")
        self.assertEqual(format_result(2.0), "2")
        self.assertEqual(format_result(3.5), "3.5")
        self.assertEqual(format_result(1 / 3), "0.333333")
        self.assertEqual(format_result(-2), "-2")
        self.assertEqual(format_result(math.nan), "Error: ÷0")
        self.assertEqual(format_result(None), "")


if __name__ == '__main__':
    unittest.main()
