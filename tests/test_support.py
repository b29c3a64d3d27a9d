"""Tests for configuration, RPN structure checks and tabulation."""

import io
import math
import unittest
from contextlib import redirect_stdout

import numpy as np
import pandas as pd

from config.config import (
    validate_config, OPERATOR_CONFIG, DEFAULT_VARIABLE_VALUES, DEMO_EXPRESSIONS
)
from core import Expression, RPNValidator, PRECEDENCE, Variable, tokenize, to_rpn
from utils import tabulate, sample_range


class TestConfig(unittest.TestCase):

    def test_validate_config(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            validate_config()
        self.assertIn("validated", buffer.getvalue())

    def test_precedence_table(self):
        self.assertIs(PRECEDENCE, OPERATOR_CONFIG["precedence"])
        self.assertEqual(PRECEDENCE, {'+': 1, '-': 1, '*': 2, '/': 2, '^': 3, '~': 3})

    def test_default_values(self):
        self.assertEqual(DEFAULT_VARIABLE_VALUES, {'pi': 3.141592654, 'e': 2.718281828})

    def test_demo_expressions_are_balanced(self):
        for text, points in DEMO_EXPRESSIONS:
            self.assertTrue(Expression(text).is_balanced(), text)
            self.assertTrue(points, text)


class TestRPNValidator(unittest.TestCase):

    def rpn(self, text):
        return to_rpn(tokenize(text))

    def test_stack_size(self):
        self.assertEqual(RPNValidator.calculate_stack_size(self.rpn("x+1")), 1)
        self.assertEqual(RPNValidator.calculate_stack_size(self.rpn("x(1)(2)")), 3)
        self.assertEqual(RPNValidator.calculate_stack_size([]), 0)

    def test_operator_shortage_is_skipped(self):
        self.assertEqual(RPNValidator.calculate_stack_size(self.rpn("-x")), 1)

    def test_function_underflow(self):
        self.assertIsNone(RPNValidator.calculate_stack_size(self.rpn("sin()")))
        self.assertFalse(RPNValidator.can_terminate(self.rpn("sin()")))

    def test_can_terminate(self):
        self.assertTrue(RPNValidator.can_terminate(self.rpn("sin(x)^2 + cos(x)^2")))
        self.assertFalse(RPNValidator.can_terminate(self.rpn("x(y)")))


class TestTabulate(unittest.TestCase):

    def test_series(self):
        series = tabulate(Expression("2*x"), [0.0, 1.0, 2.0])
        self.assertIsInstance(series, pd.Series)
        self.assertEqual(series.name, "2*x")
        self.assertEqual(series.index.name, "x")
        self.assertEqual(series.tolist(), [0.0, 2.0, 4.0])
        self.assertEqual(series.loc[1.0], 2.0)

    def test_other_variable(self):
        series = tabulate(Expression("2*a + 1"), [-1.0, 10.0], variable='a')
        self.assertEqual(series.tolist(), [-1.0, 21.0])

    def test_failures_are_nan(self):
        series = tabulate(Expression("sqrt(x)"), [4.0, -4.0])
        self.assertEqual(series.iloc[0], 2.0)
        self.assertTrue(math.isnan(series.iloc[1]))

    def test_base_variables(self):
        series = tabulate(Expression("x + k"), [1.0], base=[Variable('k', 10.0)])
        self.assertEqual(series.iloc[0], 11.0)

    def test_sample_range(self):
        np.testing.assert_allclose(sample_range(0, 1, 3), [0.0, 0.5, 1.0])
        self.assertEqual(len(sample_range(-1, 1)), 11)


if __name__ == '__main__':
    unittest.main()
