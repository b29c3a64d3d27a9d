"""core/tokenizer.py - 表达式分词"""
import re
import logging

from config.config import EXPRESSION_CONFIG
from core.token_system import classify_token
from core.operators import DEFAULT_FUNCTIONS

logger = logging.getLogger(__name__)

DELIMITERS = EXPRESSION_CONFIG["delimiters"]
_DELIMITER_RE = re.compile('[' + re.escape(DELIMITERS) + ']')
_WHITESPACE_RE = re.compile(r'\s+')


def clean_text(text):
    """去掉所有空白字符"""
    if not EXPRESSION_CONFIG["strip_whitespace"]:
        return text
    return _WHITESPACE_RE.sub('', text)


def check_parenthesis(text):
    """
    检查括号是否平衡：遇到 '(' 加一，')' 减一，计数变负立即停止。
    Returns:
        计数最终为0时返回True
    """
    count = 0
    for ch in text:
        if count < 0:
            break
        if ch == '(':
            count += 1
        elif ch == ')':
            count -= 1
    return count == 0


def split_tokens(text):
    """
    按分隔字符切分（不检查括号）。
    分隔字符之间的非空片段是一个token，分隔字符本身是单字符token。
    """
    tokens = []
    pos = 0
    for match in _DELIMITER_RE.finditer(text):
        piece = text[pos:match.start()]
        if piece:
            tokens.append(piece)
        tokens.append(match.group())
        pos = match.end()
    tail = text[pos:]
    if tail:
        tokens.append(tail)
    return tokens


def tokenize(text, functions=DEFAULT_FUNCTIONS):
    """
    把表达式文本分成带类型的 Token 序列
    Args:
        text: 中缀表达式
        functions: 函数表，决定哪些名字是函数
    Returns:
        Token 列表；括号不平衡时为空列表
    """
    text = clean_text(text)
    if not check_parenthesis(text):
        logger.debug(f"Unbalanced parenthesis in expression: {text!r}")
        return []
    return [classify_token(piece, functions) for piece in split_tokens(text)]
