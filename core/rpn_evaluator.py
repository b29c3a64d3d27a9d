"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
from collections.abc import Mapping

from config.config import EXPRESSION_CONFIG
from core.token_system import (
    TokenType, Variable, BINARY_OPERATORS, UNARY_OPERATORS, find_function
)
from core.operators import calculate, calculate_unary, DEFAULT_FUNCTIONS

logger = logging.getLogger(__name__)

NAN = float('nan')


def as_variables(bindings):
    """
    统一变量绑定格式
    Args:
        bindings: {name: value} 字典，或 Variable / (name, value) 序列
    Returns:
        Variable 元组，顺序即查找顺序
    """
    if isinstance(bindings, Mapping):
        return tuple(Variable(name, float(value)) for name, value in bindings.items())
    return tuple(Variable(name, float(value)) for name, value in bindings)


def resolve_variable(name, variables):
    """
    按名字查找变量值，'~name' 得到 name 的相反数
    Returns:
        float，或者 None（未找到）
    """
    prefix = EXPRESSION_CONFIG["negation_prefix"]
    for variable in variables:
        if variable.name == name:
            return variable.value
        elif prefix + variable.name == name:
            return -1.0 * variable.value
    return None


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, variables, functions=DEFAULT_FUNCTIONS):
        """
        评估RPN表达式
        Args:
            token_sequence: RPN 顺序的 Token 序列
            variables: 变量绑定（见 as_variables）
            functions: 函数表
        Returns:
            float；栈最终不是恰好一个值时返回 nan
        """
        variables = as_variables(variables)
        stack = []

        for token in token_sequence:
            # ================== 数字 ==================
            if token.type == TokenType.NUMBER:
                stack.append(token.value)
                continue

            # ================== 函数 ==================
            if token.type == TokenType.FUNCTION:
                function = find_function(token.name, functions)
                if function is not None:
                    if len(stack) < 1:
                        # 函数没有参数：整个求值中止
                        logger.debug(f"Insufficient operands for function {token.name}")
                        return NAN
                    operand = stack.pop()
                    stack.append(RPNEvaluator._apply(function, operand))
                    continue
                # 函数表里没有这个名字，按变量处理

            # ================== 操作符 ==================
            elif token.type == TokenType.OPERATOR:
                if token.name in BINARY_OPERATORS and len(stack) >= 2:
                    b = stack.pop()
                    a = stack.pop()
                    stack.append(calculate(a, b, token.name))
                elif token.name in UNARY_OPERATORS and len(stack) >= 1:
                    stack.append(calculate_unary(stack.pop(), token.name))
                else:
                    # 操作数不足：跳过该操作符，继续求值
                    logger.debug(f"Insufficient operands for {token.name}, skipped")
                continue

            # ================== 变量 ==================
            value = resolve_variable(token.name, variables)
            if value is not None:
                stack.append(value)
            else:
                logger.debug(f"Unknown variable: {token.name}")

        if len(stack) == 1:
            return stack[0]

        logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
        return NAN

    @staticmethod
    def _apply(function, operand):
        """调用函数；自定义函数抛出的数学错误转为 nan"""
        try:
            return float(function(operand))
        except (ValueError, ZeroDivisionError, OverflowError, TypeError) as e:
            logger.debug(f"Function {function.name}({operand}) failed: {e}")
            return NAN
