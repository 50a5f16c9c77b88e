import pandas as pd
import logging
from collections import OrderedDict
from typing import Dict, Optional

from config.config import BATCH_CONFIG
from core import ExpressionEvaluator, EvaluationError

logger = logging.getLogger(__name__)


class BatchEvaluator:

    def __init__(self, cache_size=None):
        self.evaluator = ExpressionEvaluator
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = cache_size if cache_size is not None else BATCH_CONFIG['cache_size']
        if self.cache_size <= 0:
            raise ValueError(f"cache_size must be positive, got {self.cache_size}")
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self) -> Dict[str, int]:
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
            'max_size': self.cache_size,
        }

    def evaluate(self, expression: str) -> int:
        """
        与 core.evaluate 语义相同，成功结果进入缓存；错误不缓存，直接抛出
        """
        if expression in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[expression]

        self._cache_misses += 1
        result = self.evaluator.evaluate(expression)
        self._result_cache[expression] = result
        self._manage_cache()
        return result

    def _evaluate_row(self, expression) -> Dict[str, Optional[object]]:
        try:
            value = self.evaluate(expression)
        except EvaluationError as e:
            logger.warning(f"Error evaluating expression '{str(expression)[:50]}': {e}")
            return {'result': None, 'error': e.kind, 'message': str(e)}
        return {'result': value, 'error': '', 'message': ''}

    def evaluate_series(self, expressions: pd.Series) -> pd.DataFrame:
        """
        Args:
            expressions: 表达式字符串的Series
        Returns:
            DataFrame，列为 expression / result / error / message，索引不变
        """
        expressions = expressions.astype(str)
        rows = [self._evaluate_row(expr) for expr in expressions]

        results = pd.DataFrame({
            'expression': expressions,
            'result': pd.array([r['result'] for r in rows], dtype='Int64'),
            'error': [r['error'] for r in rows],
            'message': [r['message'] for r in rows],
        }, index=expressions.index)

        failed = int((results['error'] != '').sum())
        logger.info(f"Evaluated {len(results)} expressions, {failed} failed")
        return results
