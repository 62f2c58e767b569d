"""
书籍业务服务层 - 上架、购买、清理过期书籍
购买规则由各书籍变体自行实现，本层不区分书籍类型
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Dict, List, Type, Union

from ..exceptions import BookNotFoundError
from ..models.book import Book, PaperBook, EBook, DemoBook
from ..models.requests import BookCreateRequest, PurchaseRequest
from ..repositories.book_repository import BookRepository
from .isbn_registry import IsbnRegistry

logger = logging.getLogger(__name__)

BOOK_CLASSES: Dict[str, Type[Book]] = {
    "paper": PaperBook,
    "ebook": EBook,
    "demo": DemoBook,
}


class BookService:
    """书籍服务类"""

    def __init__(self, book_repository: BookRepository, isbn_registry: IsbnRegistry):
        self.book_repository = book_repository
        self.isbn_registry = isbn_registry

    def add_book(self, book: Book) -> Book:
        """上架书籍，相同ISBN后写覆盖"""
        self.book_repository.save(book)
        logger.info(
            f"已上架《{book.title}》({book.isbn})",
            extra={"event": "added", "isbn": book.isbn, "title": book.title}
        )
        return book

    def create_book(self, request: BookCreateRequest) -> Book:
        """根据请求创建对应类型的书籍并上架"""
        book_class = BOOK_CLASSES[request.kind]
        book = book_class(self.isbn_registry, **request.model_dump(exclude={"kind"}))
        return self.add_book(book)

    def get_book_by_isbn(self, isbn: str) -> Book:
        """根据ISBN获取书籍"""
        book = self.book_repository.get_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError(isbn)
        return book

    def get_all_books(self) -> List[Book]:
        """获取所有书籍"""
        return self.book_repository.get_all()

    def search_books_by_title(self, title_keyword: str) -> List[Book]:
        """根据标题搜索书籍"""
        return self.book_repository.search_by_title(title_keyword)

    def search_books_by_author(self, author_keyword: str) -> List[Book]:
        """根据作者搜索书籍"""
        return self.book_repository.search_by_author(author_keyword)

    def remove_outdated_books(self, cutoff: Union[int, date]) -> List[str]:
        """删除出版年份早于 cutoff 的书籍，同年的保留

        Args:
            cutoff: 年份，或取其年份的 date/datetime

        Returns:
            被删除书籍的ISBN列表
        """
        cutoff_year = cutoff.year if isinstance(cutoff, date) else cutoff
        outdated = [
            book for book in self.book_repository.get_all()
            if book.published_year < cutoff_year
        ]

        for book in outdated:
            self.book_repository.delete(book.isbn)
            logger.info(
                f"已下架过期书籍《{book.title}》({book.isbn})",
                extra={"event": "removed", "isbn": book.isbn, "title": book.title}
            )

        return [book.isbn for book in outdated]

    def buy_book(self, isbn: str, quantity: int, email: str, address: str) -> Decimal:
        """购买书籍

        Returns:
            应付金额 price * quantity

        Raises:
            BookNotFoundError: ISBN不存在
            PurchaseError: 书籍购买规则不满足（原样抛出）
        """
        book = self.get_book_by_isbn(isbn)
        book.buy(email, address, quantity)

        amount = book.price * quantity
        logger.info(
            f"已支付金额: {amount}",
            extra={"event": "paid", "isbn": book.isbn, "title": book.title, "amount": amount}
        )
        return amount

    def purchase(self, request: PurchaseRequest) -> Decimal:
        """按购买请求下单"""
        return self.buy_book(request.isbn, request.quantity, request.email, request.address)
