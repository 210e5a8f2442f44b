"""
Побайтовый курсор для парсера шаблонов.

Хранит буфер и текущую позицию, ведёт учёт строк и колонок
для точной диагностики ошибок.
"""

from __future__ import annotations

from typing import Optional

from .errors import LeafSyntaxError
from .utils import NEWLINE


class ByteScanner:
    """
    Курсор над неизменяемым байтовым буфером.

    offset считается с нуля, line и column с единицы.
    """

    def __init__(self, data: bytes):
        self.bytes = bytes(data)
        self.offset = 0
        self.line = 1
        self.column = 1
        self.length = len(self.bytes)

    def peek(self) -> Optional[int]:
        """Следующий байт без продвижения позиции или None в конце буфера."""
        if self.offset >= self.length:
            return None
        return self.bytes[self.offset]

    def pop(self) -> int:
        """
        Потребляет один байт, обновляя номера строк и колонок.
        """
        if self.offset >= self.length:
            raise LeafSyntaxError.end_of_input()

        byte = self.bytes[self.offset]
        if byte == NEWLINE:
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.offset += 1
        return byte

    def slice(self, start: int, end: int) -> bytes:
        return self.bytes[start:end]

    def __repr__(self) -> str:
        return f"ByteScanner(offset={self.offset}, {self.line}:{self.column})"


__all__ = ["ByteScanner"]
