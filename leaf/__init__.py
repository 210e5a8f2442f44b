"""
Leaf: парсер тегового языка шаблонов.

Превращает байты шаблона в дерево узлов Syntax; вычисление тегов
и рендеринг выполняются отдельным слоем.
"""

from __future__ import annotations

from .config import DEFAULT_OPTIONS, ParserOptions, load_options, options_from_mapping
from .errors import ConfigError, LeafSyntaxError, LeafUserError, ParseError, SyntaxErrorKind
from .log import setup_logging
from .parser import Parser, parse, parse_file
from .syntax import (
    Constant,
    DoubleConstant,
    Expression,
    Identifier,
    IntConstant,
    Operator,
    Raw,
    Source,
    StringConstant,
    Syntax,
    SyntaxKind,
    Tag,
    describe,
)

__all__ = [
    "Parser",
    "parse",
    "parse_file",
    "ParserOptions",
    "DEFAULT_OPTIONS",
    "load_options",
    "options_from_mapping",
    "LeafUserError",
    "LeafSyntaxError",
    "ParseError",
    "ConfigError",
    "SyntaxErrorKind",
    "Syntax",
    "Source",
    "SyntaxKind",
    "Raw",
    "Tag",
    "Identifier",
    "IntConstant",
    "DoubleConstant",
    "StringConstant",
    "Constant",
    "Expression",
    "Operator",
    "describe",
    "setup_logging",
]
