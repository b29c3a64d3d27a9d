"""utils/tabulate.py"""
import numpy as np
import pandas as pd

from config.config import EXPRESSION_CONFIG
from core.operators import DEFAULT_VARIABLES
from core.expression import bind_default_variable


def sample_range(start, stop, num=11):
    """[start, stop] 上均匀取 num 个点"""
    return np.linspace(start, stop, num)


def tabulate(expression, values, variable=None, base=DEFAULT_VARIABLES):
    """
    在多个点上对表达式求值
    Args:
        expression: Expression
        values: 变量取值序列
        variable: 绑定的变量名，默认 x
        base: 其他变量（默认 pi, e）
    Returns:
        pd.Series，索引为变量取值，name 为表达式文本；失败的点为 NaN
    """
    variable = variable or EXPRESSION_CONFIG["default_variable"]
    points = np.asarray(values, dtype=float).ravel()
    results = [
        expression.evaluate_with(bind_default_variable(point, base, name=variable))
        for point in points
    ]
    index = pd.Index(points, name=variable)
    return pd.Series(results, index=index, name=expression.text, dtype=float)
