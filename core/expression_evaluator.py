"""中缀表达式求值器 - 扫描、验证、两轮归约"""
import logging

from core.errors import EvaluationError
from core.token_system import Tokenizer, ExpressionValidator
from core.operators import reduce_multiplicative, reduce_additive

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """计算只含非负整数和 + - * 的表达式"""

    @staticmethod
    def evaluate(expression):
        """
        Args:
            expression: 表达式字符串，如 "5 + 3 * 2"
        Returns:
            int64 范围内的 Python int
        Raises:
            MalformedExpression, NumericOverflow
        """
        if not isinstance(expression, str):
            raise TypeError(f"expression must be str, not {type(expression).__name__}")

        try:
            tokens = Tokenizer.scan(expression)
            numbers, operators = ExpressionValidator.split(tokens, expression)
        except EvaluationError as e:
            logger.debug(f"Rejected expression {expression!r}: {e}")
            raise

        numbers, operators = reduce_multiplicative(numbers, operators)
        return int(reduce_additive(numbers, operators))


def evaluate(expression):
    return ExpressionEvaluator.evaluate(expression)
