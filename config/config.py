"""配置文件"""

# 表达式解析参数
EXPRESSION_CONFIG = {
    "delimiters": "()+-*/^~",  # 分隔字符，每个都是单字符token
    "strip_whitespace": True,  # 分词前去掉所有空白
    "default_variable": "x",  # evaluate(number) 绑定的变量名
    "number_format": "g",  # RPN中数字的重新渲染格式（与C++ ostream默认一致）
    "negation_prefix": "~",
}

# 操作符参数
OPERATOR_CONFIG = {
    "precedence": {
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
        "^": 3,
        "~": 3,
    },
    "left_associative": ("+", "-", "*", "/"),  # ^ 和 ~ 不是左结合
    "binary": ("+", "-", "*", "/", "^"),
    "unary": ("~",),
}

# 默认变量（未显式提供完整变量集时自动使用）
DEFAULT_VARIABLE_VALUES = {
    "pi": 3.141592654,
    "e": 2.718281828,
}

# 默认函数表的名字，顺序即查找顺序
DEFAULT_FUNCTION_NAMES = ("sin", "cos", "tan", "ln", "log", "exp", "sqrt", "abs")

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# 演示程序：(表达式, 求值点)
# 求值点: None -> 默认变量; float -> 绑定x; dict -> 完整变量集
DEMO_EXPRESSIONS = [
    ("x^3 - 2*x^2 -x + 1", [{"x": -1.0}, -0.5]),
    ("2*a + 1", [{"a": -1.0}, {"a": -10.0}, 10.0]),
    ("e^~x - ln(x)", [1.0, 1.5]),
    ("e^~(x^2) - x", [-0.5, 0.5]),
    ("x^4 - 6*x^3 + 12*x^2 - 10*x + 3", [3.0, 1.0, 0.0]),
    ("e", [None]),
    ("pi", [None]),
    ("~pi", [None]),
    ("sin(x)", [3.1416 / 2]),
    ("~7*e^~x + sin(tan(x^3) + cos(x - pi))", [3.1416 / 2]),
]


# 验证配置
def validate_config():
    """验证配置的合理性"""
    precedence = OPERATOR_CONFIG["precedence"]
    assert precedence["+"] == precedence["-"] == 1, "+ - 优先级为1"
    assert precedence["*"] == precedence["/"] == 2, "* / 优先级为2"
    assert precedence["^"] == precedence["~"] == 3, "^ ~ 优先级为3"
    assert set(OPERATOR_CONFIG["binary"]) | set(OPERATOR_CONFIG["unary"]) == set(precedence), \
        "每个操作符必须是一元或二元"
    assert set(precedence) | {"(", ")"} == set(EXPRESSION_CONFIG["delimiters"]), \
        "分隔字符 = 操作符 + 括号"
    assert set(DEFAULT_VARIABLE_VALUES) == {"pi", "e"}, "默认变量只有 pi 和 e"
    assert DEFAULT_FUNCTION_NAMES == ("sin", "cos", "tan", "ln", "log", "exp", "sqrt", "abs"), \
        "默认函数表名字不可更改"
    print("Configuration validated successfully!")
