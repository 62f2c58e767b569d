"""
请求模型 - 创建书籍与购买请求的参数校验
"""
from datetime import date
from decimal import Decimal
from typing import Literal, Union

from pydantic import BaseModel, Field


class PaperBookCreateRequest(BaseModel):
    """创建纸质书请求"""
    kind: Literal["paper"] = "paper"
    title: str = Field(min_length=1)
    published: date
    price: Decimal = Field(ge=0)
    author: str
    stock: int = Field(ge=0)
    shippable: bool = True

class EBookCreateRequest(BaseModel):
    """创建电子书请求"""
    kind: Literal["ebook"] = "ebook"
    title: str = Field(min_length=1)
    published: date
    price: Decimal = Field(ge=0)
    author: str
    file_type: str = "PDF"

class DemoBookCreateRequest(BaseModel):
    """创建样书请求（价格固定为0）"""
    kind: Literal["demo"] = "demo"
    title: str = Field(min_length=1)
    published: date
    author: str

BookCreateRequest = Union[PaperBookCreateRequest, EBookCreateRequest, DemoBookCreateRequest]

class PurchaseRequest(BaseModel):
    """购买请求"""
    isbn: str
    quantity: int
    email: str
    address: str = ""
