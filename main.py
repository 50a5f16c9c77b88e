"""主程序入口 - 单个表达式、交互式输入或批量文件"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, CLI_CONFIG, validate_config
from core import evaluate, EvaluationError
from batch.evaluator import BatchEvaluator
from data.data_loader import load_expressions, save_results, summarize_results

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG['level']).upper()),
        format=LOGGING_CONFIG['format']
    )


def format_error(error):
    """把错误类型映射为给用户看的提示，不做其他解释"""
    message = CLI_CONFIG['error_messages'].get(error.kind, 'Evaluation failed')
    return f"Error! {message}: {error}"


def run_single(expression):
    """求值一个表达式并打印；返回进程退出码"""
    try:
        result = evaluate(expression)
    except EvaluationError as e:
        print(format_error(e), file=sys.stderr)
        return 1
    print(CLI_CONFIG['result_template'].format(result))
    return 0


def run_interactive(input_func=input):
    """逐行读取表达式，空行或EOF结束"""
    exit_code = 0
    while True:
        try:
            expression = input_func(CLI_CONFIG['prompt'])
        except EOFError:
            break
        if expression.strip() == '':
            break
        # 整个会话返回最差的状态
        exit_code = max(exit_code, run_single(expression))
    return exit_code


def run_batch(input_path, output_path=None, column=None):
    expressions = load_expressions(input_path, column=column)
    results = BatchEvaluator().evaluate_series(expressions)

    if output_path:
        save_results(results, output_path)
    else:
        for _, row in results.iterrows():
            if row['error']:
                logger.info(f"{row['expression']} -> {row['message']}")
            else:
                logger.info(f"{row['expression']} = {row['result']}")

    summary = summarize_results(results)
    logger.info(f"Summary: {summary}")
    return 0 if summary['ok'] == summary['total'] else 1


def main(args):
    setup_logging(args.log_level)
    validate_config()

    if args.input_path:
        return run_batch(args.input_path, args.output_path, args.column)
    if args.expression is not None:
        return run_single(args.expression)
    return run_interactive()


def build_parser():
    parser = argparse.ArgumentParser(description="Integer expression evaluator (+, -, *)")

    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to evaluate, e.g. '5 + 3 * 2'. Prompts when omitted"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="CSV or text file with expressions to evaluate in batch"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save batch results as CSV"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=None,
        help="Name of the expression column in a CSV input"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default from config)"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
