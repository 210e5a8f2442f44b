"""Общие вспомогательные функции для работы с байтами."""

from __future__ import annotations

from typing import Optional


# ---------------------------------------------------------------------------
# Именованные байты грамматики
# ---------------------------------------------------------------------------

NEWLINE = 0x0A
SPACE = 0x20
QUOTE = 0x22
LEFT_PARENTHESIS = 0x28
RIGHT_PARENTHESIS = 0x29
PLUS = 0x2B
COMMA = 0x2C
HYPHEN = 0x2D
PERIOD = 0x2E
LESS_THAN = 0x3C
GREATER_THAN = 0x3E
BACKSLASH = 0x5C
LEFT_CURLY_BRACKET = 0x7B
RIGHT_CURLY_BRACKET = 0x7D


# ---------------------------------------------------------------------------
# Классификация
# ---------------------------------------------------------------------------

def is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def is_alphanumeric(byte: int) -> bool:
    """ASCII-буква или цифра."""
    return is_digit(byte) or 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


# ---------------------------------------------------------------------------
# Декодирование
# ---------------------------------------------------------------------------

def make_string(data: bytes) -> str:
    """Декодируем байты в UTF-8 (не падаем на битых байтах)."""
    return bytes(data).decode("utf-8", errors="replace")


def describe_byte(byte: Optional[int]) -> str:
    """Человекочитаемое представление байта для диагностики."""
    if byte is None:
        return "EOF"
    if byte == NEWLINE:
        return "\\n"
    if 0x20 <= byte < 0x7F:
        return chr(byte)
    return f"0x{byte:02X}"


__all__ = [
    "is_digit",
    "is_alphanumeric",
    "make_string",
    "describe_byte",
]
