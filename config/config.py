"""配置文件"""
import logging

import numpy as np

# 求值器参数
EVALUATOR_CONFIG = {
    "operators": ("+", "-", "*"),
    "multiplicative_operators": ("*",),
    "whitespace": " \t\r\n\x0b\x0c",  # 扫描前全部删除
    "digits": "0123456789",  # 只接受ASCII数字
    "int64_max": 2 ** 63 - 1,
}

# 批量求值参数
BATCH_CONFIG = {
    "cache_size": 1000,
    "expression_column": "expression",
    "output_path": "evaluation_results.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 命令行
CLI_CONFIG = {
    "prompt": "Enter an expression (e.g. 5 + 3 * 2): ",
    "result_template": "Result: {}",
    "error_messages": {
        "malformed": "Malformed expression",
        "overflow": "Number too large",
    },
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    int64 = np.iinfo(np.int64)
    assert set(EVALUATOR_CONFIG["operators"]) == {"+", "-", "*"}, "只支持 + - *"
    assert set(EVALUATOR_CONFIG["multiplicative_operators"]) <= set(EVALUATOR_CONFIG["operators"])
    assert EVALUATOR_CONFIG["int64_max"] == int64.max, "上界必须与 numpy int64 一致"
    assert not set(EVALUATOR_CONFIG["whitespace"]) & set(EVALUATOR_CONFIG["operators"])
    assert BATCH_CONFIG["cache_size"] > 0, "缓存大小必须为正"
    assert set(CLI_CONFIG["error_messages"]) == {"malformed", "overflow"}
    logging.getLogger(__name__).info("Configuration validated successfully!")
