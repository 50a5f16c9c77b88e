"""core/token_system.py"""
from enum import Enum
import logging

from config.config import EVALUATOR_CONFIG
from core.errors import MalformedExpression, NumericOverflow

logger = logging.getLogger(__name__)

OPERATOR_SYMBOLS = frozenset(EVALUATOR_CONFIG["operators"])
WHITESPACE = frozenset(EVALUATOR_CONFIG["whitespace"])
DIGITS = frozenset(EVALUATOR_CONFIG["digits"])
INT64_MAX = EVALUATOR_CONFIG["int64_max"]
INT64_DIGITS = len(str(INT64_MAX))


class TokenType(Enum):
    NUMBER = "number"  # 操作数
    OPERATOR = "operator"  # 操作符


class ScanState(Enum):
    START = "start"
    DIGIT_RUN = "digit_run"  # 正在读取数字串
    OPERATOR = "operator"  # 刚读完一个操作符


class Token:
    """不可变的Token：数字或单字符操作符"""
    __slots__ = ('type', 'value', 'position')

    def __init__(self, token_type, value, position=None):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'position', position)  # 在原始输入中的下标

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @classmethod
    def number(cls, value, position=None):
        return cls(TokenType.NUMBER, value, position)

    @classmethod
    def operator(cls, symbol, position=None):
        if symbol not in OPERATOR_SYMBOLS:
            raise ValueError(f"Unknown operator: {symbol!r}")
        return cls(TokenType.OPERATOR, symbol, position)

    @property
    def is_number(self):
        return self.type is TokenType.NUMBER

    @property
    def is_operator(self):
        return self.type is TokenType.OPERATOR

    def __eq__(self, other):
        # position只用于报错，不参与比较
        if not isinstance(other, Token):
            return NotImplemented
        return self.type is other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.is_number:
            return f"Number({self.value})"
        return f"Operator({self.value})"


class Tokenizer:
    """数字串/操作符两状态的扫描器"""

    @staticmethod
    def _strip_whitespace(expression):
        """删除所有空白，保留每个字符在原始输入中的下标"""
        return [(pos, ch) for pos, ch in enumerate(expression) if ch not in WHITESPACE]

    @staticmethod
    def _parse_number(digits, position, expression):
        # 先按位数判断，超长数字串不交给 int()
        significant = digits.lstrip('0') or '0'
        value = int(significant) if len(significant) <= INT64_DIGITS else None
        if value is None or value > INT64_MAX:
            shown = digits if len(digits) <= 30 else f"{digits[:20]}... ({len(digits)} digits)"
            raise NumericOverflow(
                f"number {shown} does not fit in a 64-bit signed integer",
                expression=expression, position=position)
        return Token.number(value, position)

    @staticmethod
    def scan(expression):
        """
        扫描表达式，在数字与操作符的每次切换处切分
        Args:
            expression: 原始输入字符串
        Returns:
            Token列表（尚未检查交替结构）
        """
        tokens = []
        state = ScanState.START
        run = []
        run_start = None

        for pos, ch in Tokenizer._strip_whitespace(expression):
            if ch in DIGITS:
                if state is not ScanState.DIGIT_RUN:
                    run = []
                    run_start = pos
                    state = ScanState.DIGIT_RUN
                run.append(ch)
            elif ch in OPERATOR_SYMBOLS:
                if state is ScanState.DIGIT_RUN:
                    tokens.append(Tokenizer._parse_number(''.join(run), run_start, expression))
                tokens.append(Token.operator(ch, pos))
                state = ScanState.OPERATOR
            else:
                raise MalformedExpression(
                    f"unexpected character {ch!r}", expression=expression, position=pos)

        if state is ScanState.DIGIT_RUN:
            tokens.append(Tokenizer._parse_number(''.join(run), run_start, expression))
        return tokens


class ExpressionValidator:
    @staticmethod
    def split(tokens, expression=None):
        """
        检查 Number, Operator, ..., Number 的严格交替
        Returns:
            (numbers, operators)，满足 len(numbers) == len(operators) + 1
        """
        if not tokens:
            raise MalformedExpression("empty expression", expression=expression)
        if not any(tk.is_number for tk in tokens):
            raise MalformedExpression("expression contains no numbers",
                                      expression=expression, position=tokens[0].position)

        numbers = []
        operators = []
        for idx, tk in enumerate(tokens):
            expect_number = idx % 2 == 0
            if expect_number and not tk.is_number:
                if idx == 0:
                    detail = f"expression starts with operator {tk.value!r}"
                else:
                    detail = f"operator {tk.value!r} follows another operator"
                raise MalformedExpression(detail, expression=expression, position=tk.position)
            if not expect_number and not tk.is_operator:
                # 扫描器会合并相邻数字，这里只是兜底
                raise MalformedExpression("two numbers without an operator between them",
                                          expression=expression, position=tk.position)
            if tk.is_number:
                numbers.append(tk.value)
            else:
                operators.append(tk.value)

        if tokens[-1].is_operator:
            raise MalformedExpression(f"expression ends with operator {tokens[-1].value!r}",
                                      expression=expression, position=tokens[-1].position)
        return numbers, operators

    @staticmethod
    def validate(tokens, expression=None):
        """检查交替结构，返回原Token序列"""
        ExpressionValidator.split(tokens, expression)
        return tokens

    @staticmethod
    def is_valid(tokens):
        try:
            ExpressionValidator.split(tokens)
        except MalformedExpression:
            return False
        return True


def tokenize(expression):
    """扫描并验证，返回严格交替的Token序列"""
    tokens = Tokenizer.scan(expression)
    return ExpressionValidator.validate(tokens, expression)
