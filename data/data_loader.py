"""数据加载和结果保存模块"""
import pandas as pd
import logging

from config.config import BATCH_CONFIG

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=None):
    """
    加载表达式文件

    Parameters:
    - file_path: CSV文件（按列读取）或纯文本文件（每行一个表达式）
    - column: CSV中表达式所在列名, 默认为 BATCH_CONFIG['expression_column']

    Returns:
    - expressions (Series of str)
    """
    column = column or BATCH_CONFIG['expression_column']
    file_path = str(file_path)
    logger.info(f"Loading expressions from {file_path}")

    if file_path.endswith('.csv'):
        # 全部按字符串读取，避免 "42" 被转成整数、空串被转成NaN
        dataset = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in dataset.columns:
            raise ValueError(f"Column '{column}' not found in {file_path}; "
                             f"available columns: {list(dataset.columns)}")
        expressions = dataset[column]
    else:
        # utf-8-sig 去掉可能存在的BOM
        with open(file_path, 'r', encoding='utf-8-sig') as f:
            lines = [line.rstrip('\r\n') for line in f]
        expressions = pd.Series([line for line in lines if line.strip()], dtype=object)

    expressions = expressions.rename('expression')
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def save_results(results, file_path=None):
    """把批量求值结果写成CSV"""
    file_path = file_path or BATCH_CONFIG['output_path']
    logger.info(f"Saving results to {file_path}")
    results.to_csv(file_path, index=False)
    return file_path


def summarize_results(results):
    """统计成功和各类错误的数量"""
    errors = results['error']
    summary = {
        'total': int(len(results)),
        'ok': int((errors == '').sum()),
        'malformed': int((errors == 'malformed').sum()),
        'overflow': int((errors == 'overflow').sum()),
    }
    if summary['ok'] < summary['total']:
        logger.warning(f"{summary['total'] - summary['ok']} of {summary['total']} expressions failed")
    else:
        logger.info("All expressions evaluated successfully")
    return summary
