"""
业务异常定义
"""

class BookStoreException(Exception):
    """基础异常类"""
    pass

class BookNotFoundError(BookStoreException):
    """书籍未找到异常"""

    def __init__(self, isbn: str):
        super().__init__(f"Book with ISBN {isbn} not found")
        self.isbn = isbn

class PurchaseError(BookStoreException):
    """购买规则异常基类"""
    pass

class InsufficientStockError(PurchaseError):
    """库存不足异常"""

    def __init__(self, title: str, requested: int, available: int):
        super().__init__(
            f"Only {available} of '{title}' available, {requested} requested"
        )
        self.title = title
        self.requested = requested
        self.available = available

class InvalidQuantityError(PurchaseError):
    """购买数量非法异常"""
    pass

class NotForSaleError(PurchaseError):
    """非卖品异常"""
    pass

class StorageError(BookStoreException):
    """计数器文件写入失败异常（内存中的编号已生效）"""

    def __init__(self, message: str, isbn: str = None, path: str = None):
        super().__init__(message)
        self.isbn = isbn
        self.path = path
