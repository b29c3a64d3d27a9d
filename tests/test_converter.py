"""Shunting-Yard conversion tests."""

import unittest

from core import tokenize, to_rpn, TokenType, CustomFunction


def rpn_of(text, functions=None):
    tokens = tokenize(text) if functions is None else tokenize(text, functions)
    return ' '.join(t.name for t in to_rpn(tokens))


class TestToRPN(unittest.TestCase):

    def test_precedence(self):
        self.assertEqual(rpn_of("1+2*3"), "1 2 3 * +")
        self.assertEqual(rpn_of("(1+2)*3"), "1 2 + 3 *")

    def test_left_associative(self):
        self.assertEqual(rpn_of("8-3-2"), "8 3 - 2 -")
        self.assertEqual(rpn_of("8/4/2"), "8 4 / 2 /")

    def test_power_right_associative(self):
        self.assertEqual(rpn_of("2^3^2"), "2 3 2 ^ ^")

    def test_polynomial(self):
        self.assertEqual(rpn_of("x^3 - 2*x^2 - x + 1"), "x 3 ^ 2 x 2 ^ * - x - 1 +")

    def test_negation(self):
        self.assertEqual(rpn_of("~pi"), "pi ~")
        self.assertEqual(rpn_of("e^~x"), "e x ~ ^")
        self.assertEqual(rpn_of("~7*x"), "7 ~ x *")

    def test_functions(self):
        self.assertEqual(rpn_of("sin(x)"), "x sin")
        self.assertEqual(
            rpn_of("~7*e^~x + sin(tan(x^3) + cos(x - pi))"),
            "7 ~ e x ~ ^ * x 3 ^ tan x pi - cos + sin +",
        )

    def test_numbers_rerendered(self):
        self.assertEqual(rpn_of("2.0*3.50"), "2 3.5 *")
        self.assertEqual(rpn_of("1e10"), "1e+10")

    def test_number_keeps_parsed_value(self):
        token = to_rpn(tokenize("3.141592654"))[0]
        self.assertEqual(token.name, "3.14159")
        self.assertEqual(token.value, 3.141592654)

    def test_custom_function_table(self):
        table = [CustomFunction('f', lambda v: v)]
        self.assertEqual(rpn_of("f(x)+sin", table), "x f sin +")

    def test_empty(self):
        self.assertEqual(to_rpn([]), [])
        self.assertEqual(to_rpn(tokenize("(1+2")), [])

    def test_no_parentheses_in_output(self):
        rpn = to_rpn(tokenize("((x))*(sin((1)))"))
        kinds = {t.type for t in rpn}
        self.assertNotIn(TokenType.LEFT_PAREN, kinds)
        self.assertNotIn(TokenType.RIGHT_PAREN, kinds)

    def test_mismatched_parenthesis_tolerated(self):
        """Converter never raises on parenthesis it cannot match."""
        tokens = tokenize("1+2")
        extra = tokenize("(")  # unbalanced alone -> empty
        self.assertEqual(extra, [])
        right = tokenize("(1)")[2]
        left = tokenize("(1)")[0]
        rpn = to_rpn(tokens + [right])
        self.assertEqual(' '.join(t.name for t in rpn), "1 2 +")
        rpn = to_rpn([left] + tokens)
        self.assertEqual(' '.join(t.name for t in rpn), "1 2 +")


if __name__ == '__main__':
    unittest.main()
