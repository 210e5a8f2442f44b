"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from LeafUserError.

Programming errors and bugs should NOT inherit from LeafUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Optional

from .utils import describe_byte

if TYPE_CHECKING:
    from .syntax import Source


class LeafUserError(Exception):
    """
    Base class for all user-facing errors in the Leaf parser.

    These errors indicate problems that the user can fix:
    malformed templates, invalid options files, etc.
    """
    pass


class SyntaxErrorKind(enum.Enum):
    """Закрытый набор причин синтаксической ошибки."""
    END_OF_INPUT = "end_of_input"
    UNEXPECTED_BYTE = "unexpected_byte"
    INVALID_NUMERIC_LITERAL = "invalid_numeric_literal"
    MISSING_OPERAND = "missing_operand"


class LeafSyntaxError(LeafUserError):
    """
    Низкоуровневая ошибка в точке разбора.

    Несёт только описание причины; координаты добавляет ParseError.
    """

    def __init__(
        self,
        kind: SyntaxErrorKind,
        message: str,
        *,
        expected: Optional[bytes] = None,
        actual: Optional[bytes] = None,
        text: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.expected = expected
        self.actual = actual
        self.text = text

    @classmethod
    def end_of_input(cls) -> LeafSyntaxError:
        return cls(SyntaxErrorKind.END_OF_INPUT, "Unexpected EOF")

    @classmethod
    def unexpected_byte(cls, expected: Optional[int], actual: Optional[int], what: Optional[str] = None) -> LeafSyntaxError:
        """
        Ожидался конкретный байт (или, если задан what, произвольная конструкция),
        а встретился другой.
        """
        wanted = what if what is not None else describe_byte(expected)
        return cls(
            SyntaxErrorKind.UNEXPECTED_BYTE,
            f"Expected `{wanted}`, got `{describe_byte(actual)}`",
            expected=bytes([expected]) if expected is not None else None,
            actual=bytes([actual]) if actual is not None else None,
        )

    @classmethod
    def invalid_numeric_literal(cls, text: str, expected_type: str) -> LeafSyntaxError:
        return cls(
            SyntaxErrorKind.INVALID_NUMERIC_LITERAL,
            f"Unexpected non {expected_type}: `{text}`",
            text=text,
        )

    @classmethod
    def missing_operand(cls) -> LeafSyntaxError:
        return cls(SyntaxErrorKind.MISSING_OPERAND, "Expected right parameter")


class ParseError(LeafUserError):
    """Ошибка разбора буфера с позицией неудавшегося фрагмента."""

    def __init__(self, source: Source, cause: LeafSyntaxError):
        super().__init__(f"{cause.message} at {source.line}:{source.column}")
        self.source = source
        self.cause = cause

    @property
    def line(self) -> int:
        return self.source.line

    @property
    def column(self) -> int:
        return self.source.column

    @property
    def kind(self) -> SyntaxErrorKind:
        return self.cause.kind


class ConfigError(LeafUserError):
    """Ошибка загрузки параметров парсера с указанием ключа."""
    pass


__all__ = [
    "LeafUserError",
    "SyntaxErrorKind",
    "LeafSyntaxError",
    "ParseError",
    "ConfigError",
]
