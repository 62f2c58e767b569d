"""
应用配置
"""
import logging
import os

# ISBN计数器
ISBN_COUNTER_BASE = 1000
DEFAULT_COUNTER_FILE = "data/isbn_counter.txt"

# 各类书籍的编号前缀
PAPER_BOOK_PREFIX = "PB"
EBOOK_PREFIX = "EB"
DEMO_BOOK_PREFIX = "DB"

# 日志
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_LEVEL = "INFO"


def get_counter_file_path() -> str:
    """获取ISBN计数器文件路径"""
    return os.getenv("BOOKSTORE_COUNTER_FILE", DEFAULT_COUNTER_FILE)


def get_log_level() -> int:
    """获取日志级别，无法识别时回退到INFO"""
    level_name = os.getenv("BOOKSTORE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO
