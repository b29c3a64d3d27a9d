"""核心模块 - Token系统、分词、Shunting-Yard转换、RPN求值器和操作符"""
from .token_system import (
    TokenType, Token, Variable, CustomFunction, OPERATOR_DEFINITIONS,
    PRECEDENCE, RPNValidator, parse_number, format_number
)
from .operators import Operators, DEFAULT_FUNCTIONS, DEFAULT_VARIABLES
from .tokenizer import tokenize, split_tokens, check_parenthesis
from .converter import to_rpn
from .rpn_evaluator import RPNEvaluator
from .expression import Expression

__all__ = [
    'TokenType', 'Token', 'Variable', 'CustomFunction', 'OPERATOR_DEFINITIONS',
    'PRECEDENCE', 'RPNValidator', 'parse_number', 'format_number',
    'Operators', 'DEFAULT_FUNCTIONS', 'DEFAULT_VARIABLES',
    'tokenize', 'split_tokens', 'check_parenthesis', 'to_rpn',
    'RPNEvaluator', 'Expression'
]
