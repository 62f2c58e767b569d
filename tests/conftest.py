"""
pytest配置文件，定义全局fixtures和测试配置
"""
import logging
import tempfile
from pathlib import Path
from typing import Callable, Generator, List

import pytest

from bookstore.repositories.book_repository import BookRepository
from bookstore.services.book_service import BookService
from bookstore.services.isbn_registry import IsbnRegistry
from tests.fixtures.sample_data import SAMPLE_PAPER_BOOKS, SAMPLE_EBOOKS, SAMPLE_DEMO_BOOKS


@pytest.fixture
def temp_counter_path() -> Generator[str, None, None]:
    """创建临时计数器文件路径（文件本身不存在）"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield str(Path(temp_dir) / "isbn_counter.txt")


@pytest.fixture
def isbn_registry(temp_counter_path: str) -> IsbnRegistry:
    """创建使用临时文件的ISBN发号器"""
    return IsbnRegistry(temp_counter_path)


@pytest.fixture
def book_repository() -> BookRepository:
    """创建空的书籍仓库"""
    return BookRepository()


@pytest.fixture
def book_service(book_repository: BookRepository, isbn_registry: IsbnRegistry) -> BookService:
    """创建书籍服务"""
    return BookService(book_repository, isbn_registry)


@pytest.fixture
def sample_paper_book_data():
    """示例纸质书数据"""
    return SAMPLE_PAPER_BOOKS[0].copy()


@pytest.fixture
def sample_ebook_data():
    """示例电子书数据"""
    return SAMPLE_EBOOKS[0].copy()


@pytest.fixture
def sample_demo_book_data():
    """示例样书数据"""
    return SAMPLE_DEMO_BOOKS[0].copy()


@pytest.fixture
def book_events(caplog) -> Callable[[str], List[logging.LogRecord]]:
    """按事件类型筛选书店日志记录"""
    caplog.set_level(logging.INFO, logger="bookstore")

    def _events(kind: str) -> List[logging.LogRecord]:
        return [r for r in caplog.records if getattr(r, "event", None) == kind]

    return _events


def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line(
        "markers", "unit: 单元测试"
    )
    config.addinivalue_line(
        "markers", "e2e: 端到端测试"
    )
    config.addinivalue_line(
        "markers", "slow: 慢速测试"
    )
