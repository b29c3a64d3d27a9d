"""core/expression.py - 可重复求值的算术表达式"""
import logging
from numbers import Real

from config.config import EXPRESSION_CONFIG
from core.token_system import Variable, RPNValidator
from core.operators import DEFAULT_FUNCTIONS, DEFAULT_VARIABLES
from core.tokenizer import clean_text, check_parenthesis, tokenize
from core.converter import to_rpn
from core.rpn_evaluator import RPNEvaluator, as_variables

logger = logging.getLogger(__name__)


def bind_default_variable(value, variables=DEFAULT_VARIABLES, name=None):
    """
    在变量集中绑定 x（已存在则覆盖，否则追加）
    Returns:
        新的 Variable 元组，原变量集不变
    """
    name = name or EXPRESSION_CONFIG["default_variable"]
    value = float(value)
    bound = []
    updated = False
    for variable in variables:
        if variable.name == name:
            bound.append(Variable(name, value))
            updated = True
        else:
            bound.append(variable)
    if not updated:
        bound.append(Variable(name, value))
    return tuple(bound)


class Expression:
    """
    中缀算术表达式。构造时分词并转成 RPN（只做一次），之后可以用不同的变量反复求值。
    构造后不再修改，求值使用局部栈，可以在多个线程中共享。
    """

    def __init__(self, text, functions=None):
        """
        Args:
            text: 中缀表达式文本
            functions: CustomFunction 序列，None 时使用默认函数表
        """
        self._functions = DEFAULT_FUNCTIONS if functions is None else tuple(functions)
        self._text = clean_text(text)
        self._balanced = check_parenthesis(self._text)

        self._tokens = tuple(tokenize(self._text, self._functions))
        self._rpn = tuple(to_rpn(self._tokens))

        self._tokens_str = ' '.join(t.name for t in self._tokens)
        self._rpn_str = ' '.join(t.name for t in self._rpn)

        if not self._balanced:
            logger.debug(f"Expression {text!r} has unbalanced parenthesis, RPN is empty")

    @property
    def text(self):
        return self._text

    @property
    def tokens(self):
        return self._tokens

    @property
    def rpn(self):
        return self._rpn

    @property
    def functions(self):
        return self._functions

    def is_balanced(self):
        return self._balanced

    def is_well_formed(self):
        """RPN 结构是否完整（假设变量都已绑定）"""
        return bool(self._rpn) and RPNValidator.can_terminate(self._rpn)

    def str(self):
        """分词后的表达式，token 之间用空格分隔"""
        return self._tokens_str

    def rpnstr(self):
        """RPN 表达式，token 之间用空格分隔"""
        return self._rpn_str

    def evaluate(self, bindings=None):
        """
        求值
        Args:
            bindings: None -> 只用默认变量 (pi, e)
                      数字 -> 默认变量加上 x=数字
                      字典或变量序列 -> 完整变量集，不合并默认变量
        Returns:
            float；任何错误都得到 nan
        """
        if bindings is None:
            return self.evaluate_with(DEFAULT_VARIABLES)
        if isinstance(bindings, Real):
            return self.evaluate_x(bindings)
        return self.evaluate_with(bindings)

    __call__ = evaluate

    def evaluate_x(self, value):
        """把 value 绑定到 x，再加上默认变量求值"""
        return self.evaluate_with(bind_default_variable(value))

    def evaluate_with(self, bindings):
        """使用调用方给出的完整变量集求值"""
        return RPNEvaluator.evaluate(self._rpn, as_variables(bindings), self._functions)

    def __str__(self):
        return self._tokens_str

    def __repr__(self):
        return f"Expression({self._text!r})"

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return (self._text == other._text
                and [f.name for f in self._functions] == [f.name for f in other._functions])

    def __hash__(self):
        return hash((self._text, tuple(f.name for f in self._functions)))
