"""
书籍数据访问层 - 内存存储，以ISBN为键
"""
from typing import Dict, List, Optional

from ..models.book import Book


class BookRepository:
    """书籍仓库类"""

    def __init__(self):
        self._books: Dict[str, Book] = {}

    def save(self, book: Book) -> Book:
        """保存书籍，相同ISBN直接覆盖"""
        self._books[book.isbn] = book
        return book

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """根据ISBN获取书籍"""
        return self._books.get(isbn)

    def get_all(self) -> List[Book]:
        """获取全部书籍"""
        return list(self._books.values())

    def search_by_title(self, title_keyword: str) -> List[Book]:
        """根据标题搜索书籍（不区分大小写）"""
        keyword = title_keyword.casefold()
        return [book for book in self._books.values() if keyword in book.title.casefold()]

    def search_by_author(self, author_keyword: str) -> List[Book]:
        """根据作者搜索书籍（不区分大小写）"""
        keyword = author_keyword.casefold()
        return [book for book in self._books.values() if keyword in book.author.casefold()]

    def delete(self, isbn: str) -> bool:
        """删除书籍"""
        return self._books.pop(isbn, None) is not None

    def __contains__(self, isbn: str) -> bool:
        return isbn in self._books

    def __len__(self) -> int:
        return len(self._books)
