"""core/token_system.py"""
import re
from enum import Enum
from typing import NamedTuple, Callable

from config.config import EXPRESSION_CONFIG, OPERATOR_CONFIG


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    OPERATOR = "operator"  # + - * / ^ ~
    LEFT_PAREN = "left_paren"  # (
    RIGHT_PAREN = "right_paren"  # )
    FUNCTION = "function"  # 函数表中的名字
    VARIABLE = "variable"  # 其余一切都当作变量引用


class Token:
    __slots__ = ('type', 'name', 'value', 'arity')

    def __init__(self, token_type, name, value=None, arity=0):
        self.type = token_type
        self.name = name
        self.value = value
        self.arity = arity

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.name == other.name

    def __hash__(self):
        return hash((self.type, self.name))

    def __repr__(self):
        return f"Token({self.type.name}, {self.name!r})"

    def __str__(self):
        return self.name


class Variable(NamedTuple):
    """变量：名字和数值"""
    name: str
    value: float


class CustomFunction(NamedTuple):
    """自定义一元实函数"""
    name: str
    func: Callable[[float], float]

    def __call__(self, x):
        return self.func(x)


PRECEDENCE = OPERATOR_CONFIG["precedence"]
LEFT_ASSOCIATIVE = frozenset(OPERATOR_CONFIG["left_associative"])
BINARY_OPERATORS = frozenset(OPERATOR_CONFIG["binary"])
UNARY_OPERATORS = frozenset(OPERATOR_CONFIG["unary"])

# 操作符 Token 定义
OPERATOR_DEFINITIONS = {
    name: Token(TokenType.OPERATOR, name, arity=2 if name in BINARY_OPERATORS else 1)
    for name in PRECEDENCE
}
LEFT_PAREN = Token(TokenType.LEFT_PAREN, '(')
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN, ')')

# strtod 能完整解析的十进制字面量（不含前导空白，token 中本来就没有空白）
_NUMBER_RE = re.compile(
    r'[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)\Z',
    re.IGNORECASE,
)


def parse_number(text):
    """
    把整个字符串解析为数字，部分解析视为失败
    Args:
        text: token文本，开头的 '~' 视为负号
    Returns:
        float，或者 None（不是数字）
    """
    prefix = EXPRESSION_CONFIG["negation_prefix"]
    if text.startswith(prefix):
        text = '-' + text[len(prefix):]
    if not _NUMBER_RE.match(text):
        return None
    return float(text)


def format_number(value):
    """按 %g 重新渲染数字，例如 2.0 -> '2'，1e10 -> '1e+10'"""
    return format(value, EXPRESSION_CONFIG["number_format"])


def precedence(token):
    """操作符优先级，非操作符（函数、括号）为0"""
    if token.type != TokenType.OPERATOR:
        return 0
    return PRECEDENCE.get(token.name, 0)


def is_left_associative(token):
    return token.type == TokenType.OPERATOR and token.name in LEFT_ASSOCIATIVE


def find_function(name, functions):
    """按名字查找函数，第一个匹配的生效"""
    for function in functions:
        if function.name == name:
            return function
    return None


def classify_token(text, functions):
    """
    一次性决定 token 的类型
    顺序: 数字 -> 函数表 -> 操作符 -> 括号 -> 变量
    """
    value = parse_number(text)
    if value is not None:
        return Token(TokenType.NUMBER, text, value=value)
    if find_function(text, functions) is not None:
        return Token(TokenType.FUNCTION, text, arity=1)
    if text in OPERATOR_DEFINITIONS:
        return OPERATOR_DEFINITIONS[text]
    if text == '(':
        return LEFT_PAREN
    if text == ')':
        return RIGHT_PAREN
    return Token(TokenType.VARIABLE, text)


class RPNValidator:
    @staticmethod
    def calculate_stack_size(token_sequence):
        """
        模拟值栈深度（不计算数值），假设所有变量都已绑定、所有函数都已知。
        与求值器规则一致：操作数不足的操作符跳过，函数遇到空栈则中止。
        Returns:
            栈深度；函数遇到空栈时返回 None
        """
        stack_size = 0
        for token in token_sequence:
            if token.type in (TokenType.NUMBER, TokenType.VARIABLE):
                stack_size += 1
            elif token.type == TokenType.FUNCTION:
                if stack_size < 1:
                    return None
            elif token.type == TokenType.OPERATOR:
                if stack_size >= token.arity:
                    stack_size = stack_size - token.arity + 1
        return stack_size

    @staticmethod
    def can_terminate(token_sequence):
        """栈深度恰好为1时表达式结构完整"""
        return RPNValidator.calculate_stack_size(token_sequence) == 1
