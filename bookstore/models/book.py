"""
书籍模型
纸质书、电子书、样书三种变体共享 is_available / buy 接口，
各自的购买规则只在本模块中实现
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, InitVar
from datetime import date
from decimal import Decimal
from typing import ClassVar, TYPE_CHECKING

from ..config import PAPER_BOOK_PREFIX, EBOOK_PREFIX, DEMO_BOOK_PREFIX
from ..exceptions import InsufficientStockError, InvalidQuantityError, NotForSaleError

if TYPE_CHECKING:
    from ..services.isbn_registry import IsbnRegistry

logger = logging.getLogger(__name__)


@dataclass
class Book(ABC):
    """书籍基类

    isbn 在构造时由 IsbnRegistry 按 ISBN_PREFIX 发放，之后不再改变。
    """
    ISBN_PREFIX: ClassVar[str] = ""

    registry: InitVar["IsbnRegistry"]
    title: str
    published: date
    price: Decimal
    author: str
    isbn: str = field(init=False)

    def __post_init__(self, registry):
        if isinstance(self.published, int):
            self.published = date(self.published, 1, 1)
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
        if self.price < 0:
            raise ValueError(f"Price must be non-negative, got {self.price}")
        self.isbn = registry.generate(self.ISBN_PREFIX)

    @property
    def published_year(self) -> int:
        return self.published.year

    @abstractmethod
    def is_available(self, quantity: int) -> bool:
        """判断指定数量是否可购买"""

    @abstractmethod
    def buy(self, email: str, address: str, quantity: int) -> None:
        """购买，违反规则时抛出 PurchaseError 子类"""

    def _log_purchase(self, quantity: int):
        amount = self.price * quantity
        logger.info(
            f"《{self.title}》已售出 {quantity} 本，金额 {amount}",
            extra={"event": "purchased", "isbn": self.isbn, "title": self.title,
                   "quantity": quantity, "amount": amount}
        )

    def __repr__(self):
        return f"{type(self).__name__}(isbn='{self.isbn}', title='{self.title}')"


@dataclass(repr=False)
class PaperBook(Book):
    """纸质书 - 有库存，可配送或到店自取"""
    ISBN_PREFIX: ClassVar[str] = PAPER_BOOK_PREFIX

    stock: int
    shippable: bool = True

    def __post_init__(self, registry):
        if self.stock < 0:
            raise ValueError(f"Stock must be non-negative, got {self.stock}")
        super().__post_init__(registry)

    def is_available(self, quantity: int) -> bool:
        return self.stock >= quantity

    def buy(self, email: str, address: str, quantity: int) -> None:
        if quantity < 1:
            raise InvalidQuantityError(
                f"Quantity for '{self.title}' must be at least 1, got {quantity}"
            )
        if not self.is_available(quantity):
            raise InsufficientStockError(self.title, quantity, self.stock)

        self.stock -= quantity
        self._log_purchase(quantity)

        if self.shippable:
            logger.info(
                f"《{self.title}》配送至 {address}",
                extra={"event": "shipping", "isbn": self.isbn, "title": self.title,
                       "address": address}
            )
        else:
            logger.info(
                f"《{self.title}》不支持配送，请 {email} 在营业时间到店自取",
                extra={"event": "pickup", "isbn": self.isbn, "title": self.title,
                       "email": email}
            )


@dataclass(repr=False)
class EBook(Book):
    """电子书 - 无库存，每笔交易限购一本"""
    ISBN_PREFIX: ClassVar[str] = EBOOK_PREFIX

    file_type: str

    def is_available(self, quantity: int) -> bool:
        return quantity == 1

    def buy(self, email: str, address: str, quantity: int) -> None:
        if not self.is_available(quantity):
            raise InvalidQuantityError(
                f"Only one e-book may be purchased per transaction, got {quantity}"
            )

        self._log_purchase(quantity)
        logger.info(
            f"正在发送 {self.file_type} 文件《{self.title}》至 {email}",
            extra={"event": "delivery", "isbn": self.isbn, "title": self.title,
                   "email": email, "file_type": self.file_type}
        )


@dataclass(repr=False)
class DemoBook(Book):
    """样书 - 价格固定为0，不可售"""
    ISBN_PREFIX: ClassVar[str] = DEMO_BOOK_PREFIX

    price: Decimal = field(default=Decimal("0"), init=False)

    def is_available(self, quantity: int) -> bool:
        return False

    def buy(self, email: str, address: str, quantity: int) -> None:
        raise NotForSaleError(f"Demo book '{self.title}' is not for sale")

