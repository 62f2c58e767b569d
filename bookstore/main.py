#!/usr/bin/env python3
"""
主应用入口 - 演示书店的上架、购买和清理流程
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from .config import LOG_FORMAT, get_counter_file_path, get_log_level
from .exceptions import BookStoreException
from .models.requests import (
    PaperBookCreateRequest, EBookCreateRequest, DemoBookCreateRequest, PurchaseRequest
)
from .repositories.book_repository import BookRepository
from .services.book_service import BookService
from .services.isbn_registry import IsbnRegistry

logger = logging.getLogger(__name__)


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None):
    """配置日志"""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format=LOG_FORMAT,
        handlers=handlers
    )


def create_service(counter_file: Optional[str] = None) -> BookService:
    """创建书籍服务"""
    registry = IsbnRegistry(counter_file or get_counter_file_path())
    return BookService(BookRepository(), registry)


def run_demo(service: BookService) -> List[Decimal]:
    """运行演示流程，每笔购买单独处理异常

    Returns:
        成功支付的金额列表
    """
    paper = service.create_book(PaperBookCreateRequest(
        title="The art of indifference", published=date(2018, 1, 1),
        price=Decimal("400.00"), author="Einstein", stock=10, shippable=True
    ))
    ebook = service.create_book(EBookCreateRequest(
        title="The art of reading minds", published=date(2021, 1, 1),
        price=Decimal("224.00"), author="Turing", file_type="PDF"
    ))
    service.create_book(EBookCreateRequest(
        title="Your psychological complexes are your eternal prison",
        published=date(2021, 1, 1), price=Decimal("180.00"), author="Turing"
    ))
    demo = service.create_book(DemoBookCreateRequest(
        title="Quantum Showcase", published=date(2009, 1, 1), author="Bohr"
    ))

    orders = [
        PurchaseRequest(isbn=paper.isbn, quantity=2,
                        email="youssefmontaser@gmail.com", address="Mania"),
        PurchaseRequest(isbn=ebook.isbn, quantity=1, email="Ahmed@gmail.com"),
        PurchaseRequest(isbn=demo.isbn, quantity=1,
                        email="Abdo@gmail.com", address="Port Said"),
    ]

    paid = []
    for order in orders:
        try:
            paid.append(service.purchase(order))
        except BookStoreException as e:
            logger.error(f"购买 {order.isbn} 失败: {e}")

    service.remove_outdated_books(2010)
    return paid


def main():
    setup_logging()
    logger.info("书店演示启动")
    paid = run_demo(create_service())
    logger.info(f"演示结束，共完成 {len(paid)} 笔支付，合计 {sum(paid, Decimal('0'))}")


if __name__ == "__main__":
    main()
