"""core/operators.py"""
import numpy as np
import logging

from config.config import EVALUATOR_CONFIG

logger = logging.getLogger(__name__)

MULTIPLICATIVE_OPERATORS = frozenset(EVALUATOR_CONFIG["multiplicative_operators"])


class Operators:
    """int64 二元操作符，溢出时按补码回绕"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore'):
            return np.int64(operand1) + np.int64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore'):
            return np.int64(operand1) - np.int64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore'):
            return np.int64(operand1) * np.int64(operand2)


SYMBOL_TO_OPERATOR = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
}


def reduce_multiplicative(numbers, operators):
    """
    消去所有 '*'：用乘积替换左右两个操作数
    Args:
        numbers: 操作数列表
        operators: 操作符列表，len(numbers) == len(operators) + 1
    Returns:
        (numbers, operators)，operators 中只剩 '+' / '-'
    """
    numbers = [np.int64(n) for n in numbers]
    operators = list(operators)

    i = 0
    while i < len(operators):
        if operators[i] in MULTIPLICATIVE_OPERATORS:
            numbers[i] = Operators.mul(numbers[i], numbers[i + 1])
            del numbers[i + 1]
            del operators[i]
            # 不移动游标：下一个操作符已经移到位置 i
        else:
            i += 1

    return numbers, operators


def reduce_additive(numbers, operators):
    """从左到右折叠 '+' / '-'，返回一个 int64"""
    result = np.int64(numbers[0])
    for op, operand in zip(operators, numbers[1:]):
        result = SYMBOL_TO_OPERATOR[op](result, operand)
    return result
