"""主程序入口 - 表达式求值演示和命令行"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, DEMO_EXPRESSIONS
from core import Expression, format_number
from utils import tabulate, sample_range

logger = logging.getLogger(__name__)


def _point_label(point):
    if point is None:
        return ""
    if isinstance(point, dict):
        return ", ".join(f"{name} = {format_number(value)}" for name, value in point.items())
    return format_number(point)


def describe(expression, points, out=None):
    """打印表达式文本、RPN 以及每个求值点的结果"""
    out = out or sys.stdout
    print(f"f(x) = {expression.str()}", file=out)
    print(f"rpn: {expression.rpnstr()}", file=out)
    for point in points:
        result = expression.evaluate(point)
        print(f"f({_point_label(point)}) = {format_number(result)}", file=out)
    print("===", file=out)


def run_demo(out=None):
    """运行演示表达式"""
    logger.info(f"Running {len(DEMO_EXPRESSIONS)} demo expressions")
    for text, points in DEMO_EXPRESSIONS:
        describe(Expression(text), points, out=out)


def parse_binding(text):
    """把 'name=value' 解析为 (name, float)，供 argparse 使用"""
    name, sep, value = text.partition('=')
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected name=value, got {text!r}")
    try:
        return name.strip(), float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value for {name!r}: {value!r}")


def build_parser():
    parser = argparse.ArgumentParser(description="Shunting-Yard arithmetic expression evaluator")

    parser.add_argument(
        "--expr",
        type=str,
        default=None,
        help="Expression to evaluate; runs the demo suite when omitted"
    )
    parser.add_argument(
        "--x",
        type=float,
        action="append",
        default=None,
        help="Value bound to x (repeatable); pi and e stay available"
    )
    parser.add_argument(
        "--var",
        type=parse_binding,
        action="append",
        default=None,
        help="Full variable binding name=value (repeatable); no defaults are merged"
    )
    parser.add_argument(
        "--range",
        type=float,
        nargs=3,
        metavar=("START", "STOP", "NUM"),
        default=None,
        help="Tabulate the expression over NUM evenly spaced x values"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: INFO)"
    )
    return parser


def main(args, out=None):
    out = out or sys.stdout

    if args.expr is None:
        run_demo(out=out)
        return 0

    expression = Expression(args.expr)
    if not expression.is_balanced():
        logger.warning(f"Unbalanced parenthesis in {args.expr!r}, result will be nan")

    if args.range is not None:
        start, stop, num = args.range
        series = tabulate(expression, sample_range(start, stop, int(num)))
        print(series.to_string(), file=out)
        return 0

    points = []
    if args.var:
        points.append(dict(args.var))
    if args.x:
        points.extend(args.x)
    if not points:
        points.append(None)

    describe(expression, points, out=out)
    return 0


if __name__ == "__main__":
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))
