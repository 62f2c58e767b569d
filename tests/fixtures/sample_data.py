"""
测试用的样本数据
"""
from datetime import date
from decimal import Decimal

# 样本纸质书数据（不含registry，构造时传入）
SAMPLE_PAPER_BOOKS = [
    {
        "title": "The art of indifference",
        "published": date(2018, 1, 1),
        "price": Decimal("400.00"),
        "author": "Einstein",
        "stock": 10,
        "shippable": True
    },
    {
        "title": "Local Pickup Only",
        "published": date(2005, 6, 1),
        "price": Decimal("59.00"),
        "author": "Knuth",
        "stock": 3,
        "shippable": False
    }
]

# 样本电子书数据
SAMPLE_EBOOKS = [
    {
        "title": "The art of reading minds",
        "published": date(2021, 1, 1),
        "price": Decimal("224.00"),
        "author": "Turing",
        "file_type": "PDF"
    },
    {
        "title": "Your psychological complexes are your eternal prison",
        "published": date(2010, 3, 1),
        "price": Decimal("180.00"),
        "author": "Turing",
        "file_type": "EPUB"
    }
]

# 样本样书数据
SAMPLE_DEMO_BOOKS = [
    {
        "title": "Quantum Showcase",
        "published": date(2009, 1, 1),
        "author": "Bohr"
    }
]

# 含非法行的计数器文件内容，只有 PB 与 EB 两行合法
# 负数计数（DB:-5）同样视为非法，计数器只会是正数
MALFORMED_COUNTER_FILE = "\n".join([
    "PB:1005",
    "garbage",
    "EB:abc",
    ":12",
    "DB:7:8",
    "",
    "XX: 3",
    "DB:-5",
    "EB:1020",
]) + "\n"
