"""批量模块 - 带缓存的求值器和 pandas 批量求值"""
from .evaluator import BatchEvaluator

__all__ = ['BatchEvaluator']
