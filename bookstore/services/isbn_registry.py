#!/usr/bin/env python3
"""
ISBN编号生成器 - 按前缀维护持久化的递增计数器
计数器文件格式: 每行一个 "前缀:计数"，每次发号后整表重写
"""
import logging
import os
import re
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from ..config import ISBN_COUNTER_BASE, get_counter_file_path
from ..exceptions import StorageError

logger = logging.getLogger(__name__)

COUNTER_LINE_PATTERN = re.compile(r'^(?P<prefix>[^:\s]+):(?P<count>\d+)$')


class IsbnRegistry:
    """线程安全的ISBN发号器"""

    def __init__(self,
                 counter_file: Optional[Union[str, Path]] = None,
                 base: int = ISBN_COUNTER_BASE):
        self.counter_file = Path(counter_file or get_counter_file_path())
        self.base = base
        self._counters: Dict[str, int] = {}
        # _lock 保护计数表，_save_lock 串行化文件写入
        self._lock = threading.Lock()
        self._save_lock = threading.Lock()
        self._load()

    def _load(self):
        """从计数器文件加载，格式不合法的行直接跳过

        计数只接受非负整数，如 "PB:-5" 这样的负数行同样跳过，
        否则会发出负数编号。
        """
        if not self.counter_file.exists():
            logger.debug(f"计数器文件不存在，从基数 {self.base} 开始: {self.counter_file}")
            return

        try:
            content = self.counter_file.read_text(encoding='utf-8')
        except OSError as e:
            raise StorageError(f"Failed to read counter file {self.counter_file}: {e}",
                               path=str(self.counter_file)) from e

        for line_no, line in enumerate(content.splitlines(), 1):
            line = line.strip()
            if not line:
                continue
            match = COUNTER_LINE_PATTERN.match(line)
            if not match:
                logger.warning(f"跳过计数器文件第 {line_no} 行的非法内容: {line!r}")
                continue
            self._counters[match.group('prefix')] = int(match.group('count'))

        logger.debug(f"已加载 {len(self._counters)} 个ISBN计数器: {self._counters}")

    def _save(self, isbn: str):
        """整表写回计数器文件"""
        with self._save_lock:
            # 在写锁内取快照，保证最后一次写入的总是最新的计数表
            with self._lock:
                lines = [f"{prefix}:{count}" for prefix, count in self._counters.items()]

            temp_file = self.counter_file.with_name(self.counter_file.name + '.tmp')
            try:
                self.counter_file.parent.mkdir(parents=True, exist_ok=True)
                temp_file.write_text("\n".join(lines) + "\n", encoding='utf-8')
                os.replace(temp_file, self.counter_file)
            except OSError as e:
                temp_file.unlink(missing_ok=True)
                logger.error(f"写入计数器文件失败 ({isbn} 仅在内存中生效): {e}")
                raise StorageError(
                    f"Issued {isbn} but failed to persist counters to {self.counter_file}: {e}",
                    isbn=isbn,
                    path=str(self.counter_file)
                ) from e

    @staticmethod
    def _validate_prefix(prefix: str):
        if not prefix or ':' in prefix or any(ch.isspace() for ch in prefix):
            raise ValueError(f"Invalid ISBN prefix: {prefix!r}")

    def generate(self, prefix: str) -> str:
        """为前缀发放下一个编号

        递增与读回在同一把锁内完成，然后同步持久化整张计数表。
        持久化失败时编号仍在内存中生效，并抛出StorageError。

        Args:
            prefix: 编号前缀，如 PB / EB / DB

        Returns:
            形如 "PB-1001" 的编号
        """
        self._validate_prefix(prefix)

        with self._lock:
            count = self._counters.get(prefix, self.base) + 1
            self._counters[prefix] = count

        isbn = f"{prefix}-{count}"
        self._save(isbn)
        logger.debug(f"发放ISBN: {isbn}")
        return isbn

    def current(self, prefix: str) -> int:
        """获取前缀最近一次发放的计数"""
        with self._lock:
            return self._counters.get(prefix, self.base)

    def snapshot(self) -> Dict[str, int]:
        """获取计数表副本"""
        with self._lock:
            return dict(self._counters)
