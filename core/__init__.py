"""核心模块 - Token系统、操作符和表达式求值器"""
from .errors import EvaluationError, MalformedExpression, NumericOverflow
from .token_system import (
    TokenType, Token, Tokenizer, ExpressionValidator, tokenize
)
from .operators import Operators, reduce_multiplicative, reduce_additive
from .expression_evaluator import ExpressionEvaluator, evaluate

__all__ = [
    'EvaluationError', 'MalformedExpression', 'NumericOverflow',
    'TokenType', 'Token', 'Tokenizer', 'ExpressionValidator', 'tokenize',
    'Operators', 'reduce_multiplicative', 'reduce_additive',
    'ExpressionEvaluator', 'evaluate'
]
