"""core/converter.py - Shunting-Yard 中缀转 RPN"""
import logging

from core.token_system import (
    TokenType, Token, precedence, is_left_associative, format_number
)

logger = logging.getLogger(__name__)


def _should_pop(top, token):
    """栈顶操作符是否要先弹出到输出"""
    if top.type == TokenType.LEFT_PAREN:
        return False
    top_prec, token_prec = precedence(top), precedence(token)
    if top_prec > token_prec:
        return True
    return top_prec == token_prec and is_left_associative(token)


def to_rpn(tokens):
    """
    Shunting-Yard 算法 (E. W. Dijkstra)
    Args:
        tokens: tokenize() 得到的 Token 序列
    Returns:
        RPN 顺序的 Token 列表。括号不匹配不报错，多余的括号直接丢弃
    """
    output = []
    operators = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            # 按数值重新渲染，统一格式
            output.append(Token(TokenType.NUMBER, format_number(token.value), value=token.value))

        elif token.type == TokenType.FUNCTION:
            operators.append(token)

        elif token.type == TokenType.OPERATOR:
            while operators and _should_pop(operators[-1], token):
                output.append(operators.pop())
            operators.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            operators.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while operators and operators[-1].type != TokenType.LEFT_PAREN:
                output.append(operators.pop())
            if operators:
                operators.pop()
            else:
                logger.debug("Mismatched ')' ignored during RPN conversion")
            # 括号前紧跟的函数绑定到这一组参数
            if operators and operators[-1].type == TokenType.FUNCTION:
                output.append(operators.pop())

        else:
            # 变量
            output.append(token)

    while operators:
        op = operators.pop()
        if op.type == TokenType.LEFT_PAREN:
            logger.debug("Unclosed '(' discarded during RPN conversion")
            continue
        output.append(op)

    return output
