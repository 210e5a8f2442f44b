"""
Узлы синтаксического дерева шаблона.

Дерево представляет собой закрытое объединение неизменяемых вариантов (SyntaxKind),
каждый вариант обёрнут в Syntax вместе с позицией в исходном буфере.
Потребители разбирают варианты через isinstance по полному набору.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from . import utils
from .utils import make_string


class Operator(enum.Enum):
    """Бинарные операторы выражений, значением служит байт оператора в исходнике."""
    ADD = utils.PLUS
    SUBTRACT = utils.HYPHEN
    LESS_THAN = utils.LESS_THAN
    GREATER_THAN = utils.GREATER_THAN

    @classmethod
    def from_byte(cls, byte: Optional[int]) -> Optional[Operator]:
        if byte is None:
            return None
        try:
            return cls(byte)
        except ValueError:
            return None

    def __str__(self) -> str:
        return _OPERATOR_NAMES[self]


_OPERATOR_NAMES = {
    Operator.ADD: "add",
    Operator.SUBTRACT: "subtract",
    Operator.LESS_THAN: "lessThan",
    Operator.GREATER_THAN: "greaterThan",
}


@dataclass(frozen=True)
class Source:
    """
    Позиция фрагмента в разбираемом буфере.

    Координаты относятся к буферу конкретного вызова парсера:
    у тела тега и строки в кавычках свой отсчёт.
    """
    line: int           # Номер строки (начиная с 1)
    column: int         # Номер колонки (начиная с 1)
    range: range        # Полуинтервал байтовых смещений


@dataclass(frozen=True)
class Syntax:
    """Узел дерева: вариант SyntaxKind и его позиция."""
    kind: SyntaxKind
    source: Source

    def __str__(self) -> str:
        return _describe_kind(self.kind)


# ---------------------------------------------------------------------------
# Варианты SyntaxKind
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Raw:
    """
    Обычный текст, выводится как есть.

    data: байты после снятия экранирования сигила.
    """
    data: bytes


@dataclass(frozen=True)
class Tag:
    """
    Тег: #name(parameters) { body }

    body равен None, если за списком параметров не было блока в фигурных скобках.
    """
    name: Syntax                           # Всегда Identifier
    parameters: Tuple[Syntax, ...]
    body: Optional[Tuple[Syntax, ...]]


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class IntConstant:
    value: int


@dataclass(frozen=True)
class DoubleConstant:
    value: float


@dataclass(frozen=True)
class StringConstant:
    """Строка в кавычках, самостоятельно разобранный вложенный шаблон."""
    syntax: Tuple[Syntax, ...]


@dataclass(frozen=True)
class Expression:
    """
    Бинарное выражение: left operator right

    Левый операнд всегда Identifier, цепочки ассоциируются вправо.
    """
    operator: Operator
    left: Syntax
    right: Syntax


# Константы параметров
Constant = Union[IntConstant, DoubleConstant, StringConstant]

# Объединенный тип для всех вариантов узла
SyntaxKind = Union[
    Raw,
    Tag,
    Identifier,
    IntConstant,
    DoubleConstant,
    StringConstant,
    Expression,
]


# ---------------------------------------------------------------------------
# Текстовое представление (для отладки и логов)
# ---------------------------------------------------------------------------

def _describe_kind(kind: SyntaxKind) -> str:
    if isinstance(kind, Raw):
        return f"Raw: `{make_string(kind.data)}`"
    if isinstance(kind, Tag):
        params = ", ".join(str(p) for p in kind.parameters)
        return f"Tag: {kind.name}({params}) Body: {kind.body is not None}"
    if isinstance(kind, Identifier):
        return f"`{kind.name}`"
    if isinstance(kind, Expression):
        return f"Expr: ({kind.left} {kind.operator} {kind.right})"
    if isinstance(kind, IntConstant):
        return f"c:{kind.value}"
    if isinstance(kind, DoubleConstant):
        return f"c:{kind.value!r}"
    if isinstance(kind, StringConstant):
        return "c:(" + ", ".join(str(s) for s in kind.syntax) + ")"
    raise TypeError(f"Unknown syntax kind: {type(kind).__name__}")


def describe(nodes: Sequence[Syntax]) -> str:
    """Многострочное описание последовательности узлов, по узлу на строку."""
    return "\n".join(str(node) for node in nodes)


__all__ = [
    "Operator",
    "Source",
    "Syntax",
    "Raw",
    "Tag",
    "Identifier",
    "IntConstant",
    "DoubleConstant",
    "StringConstant",
    "Expression",
    "Constant",
    "SyntaxKind",
    "describe",
]
