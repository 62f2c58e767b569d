"""
测试fixtures包
"""
from .sample_data import (
    SAMPLE_PAPER_BOOKS,
    SAMPLE_EBOOKS,
    SAMPLE_DEMO_BOOKS,
    MALFORMED_COUNTER_FILE
)

__all__ = [
    "SAMPLE_PAPER_BOOKS",
    "SAMPLE_EBOOKS",
    "SAMPLE_DEMO_BOOKS",
    "MALFORMED_COUNTER_FILE"
]
