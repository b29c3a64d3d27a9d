"""core/operators.py"""
import numpy as np
import logging

from config.config import DEFAULT_VARIABLE_VALUES, DEFAULT_FUNCTION_NAMES
from core.token_system import Variable, CustomFunction

logger = logging.getLogger(__name__)


def _scalar(result):
    """numpy 标量转回 Python float"""
    return float(result)


class Operators:
    """所有操作符的静态方法集合，按 IEEE 浮点语义计算（除零得 inf，无效运算得 nan）"""

    @staticmethod
    def add(a, b):
        with np.errstate(all='ignore'):
            return _scalar(np.add(a, b, dtype=np.float64))

    @staticmethod
    def sub(a, b):
        with np.errstate(all='ignore'):
            return _scalar(np.subtract(a, b, dtype=np.float64))

    @staticmethod
    def mul(a, b):
        with np.errstate(all='ignore'):
            return _scalar(np.multiply(a, b, dtype=np.float64))

    @staticmethod
    def div(a, b):
        """a/b，b为0时得到 ±inf 或 nan，不抛异常"""
        with np.errstate(all='ignore'):
            return _scalar(np.divide(a, b, dtype=np.float64))

    @staticmethod
    def pow(a, b):
        """负底数的分数次幂得到 nan"""
        with np.errstate(all='ignore'):
            return _scalar(np.power(a, b, dtype=np.float64))

    @staticmethod
    def neg(x):
        return -1.0 * x

    # 数学函数（一元）
    @staticmethod
    def sin(x):
        with np.errstate(all='ignore'):
            return _scalar(np.sin(x, dtype=np.float64))

    @staticmethod
    def cos(x):
        with np.errstate(all='ignore'):
            return _scalar(np.cos(x, dtype=np.float64))

    @staticmethod
    def tan(x):
        with np.errstate(all='ignore'):
            return _scalar(np.tan(x, dtype=np.float64))

    @staticmethod
    def ln(x):
        """自然对数"""
        with np.errstate(all='ignore'):
            return _scalar(np.log(x, dtype=np.float64))

    @staticmethod
    def log(x):
        """以10为底的对数"""
        with np.errstate(all='ignore'):
            return _scalar(np.log10(x, dtype=np.float64))

    @staticmethod
    def exp(x):
        with np.errstate(all='ignore'):
            return _scalar(np.exp(x, dtype=np.float64))

    @staticmethod
    def sqrt(x):
        with np.errstate(all='ignore'):
            return _scalar(np.sqrt(x, dtype=np.float64))

    @staticmethod
    def abs(x):
        return _scalar(np.abs(np.float64(x)))


BINARY_METHODS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.pow,
}

UNARY_METHODS = {
    '~': Operators.neg,
}


def calculate(a, b, op):
    """二元运算，未知操作符返回 nan"""
    method = BINARY_METHODS.get(op)
    if method is None:
        logger.debug(f"Unknown binary operator: {op}")
        return float('nan')
    return method(a, b)


def calculate_unary(x, op):
    """一元运算，未知操作符返回 nan"""
    method = UNARY_METHODS.get(op)
    if method is None:
        logger.debug(f"Unknown unary operator: {op}")
        return float('nan')
    return method(x)


# 默认函数表与默认变量只构造一次，按引用共享
DEFAULT_FUNCTIONS = tuple(
    CustomFunction(name, getattr(Operators, name)) for name in DEFAULT_FUNCTION_NAMES
)

DEFAULT_VARIABLES = tuple(
    Variable(name, value) for name, value in DEFAULT_VARIABLE_VALUES.items()
)
