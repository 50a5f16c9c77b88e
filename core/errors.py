"""core/errors.py - 表达式求值的错误类型"""


class EvaluationError(Exception):
    """所有求值错误的基类"""
    kind = "evaluation_error"

    def __init__(self, detail, expression=None, position=None):
        super().__init__(detail)
        self.detail = detail
        self.expression = expression
        self.position = position  # 原始输入中的字符下标，未知时为 None

    def __str__(self):
        if self.position is None:
            return self.detail
        return f"{self.detail} at position {self.position}"


class MalformedExpression(EvaluationError):
    """非法字符、数字/运算符不交替、空输入等"""
    kind = "malformed"


class NumericOverflow(EvaluationError):
    """数字串超出 int64 范围"""
    kind = "overflow"
