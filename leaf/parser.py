"""
Парсер шаблонов Leaf.

Рекурсивным спуском преобразует байтовый буфер в последовательность узлов
Syntax. Тело тега и строка в кавычках вырезаются из буфера и разбираются
новым экземпляром Parser, результат становится вложенным поддеревом.

Грамматика:
template   → element*
element    → tag | raw
raw        → байты до неэкранированного сигила
tag        → SIGIL identifier "(" params ")" body?
params     → (param ("," param)*)?
param      → string | number | identExpr
string     → '"' байты до неэкранированной '"' '"'
number     → digit+ ("." digit+)?
identExpr  → identifier (("<" | ">" | "-" | "+") param)?
body       → "{" байты до неэкранированной "}" "}"
identifier → alnum*
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .config import DEFAULT_OPTIONS, ParserOptions
from .errors import LeafSyntaxError, ParseError
from .scanner import ByteScanner
from .syntax import (
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
)
from .utils import (
    BACKSLASH,
    COMMA,
    LEFT_CURLY_BRACKET,
    LEFT_PARENTHESIS,
    PERIOD,
    QUOTE,
    RIGHT_CURLY_BRACKET,
    RIGHT_PARENTHESIS,
    SPACE,
    is_alphanumeric,
    is_digit,
    make_string,
)

_LOG = logging.getLogger(__name__)


def _starts_parameter(byte: int) -> bool:
    """Может ли байт открывать параметр: строку, число или идентификатор."""
    return byte == QUOTE or is_alphanumeric(byte)


class Parser:
    """
    Рекурсивный парсер одного буфера.

    Владеет собственным курсором; общего изменяемого состояния
    между экземплярами нет.
    """

    def __init__(self, data: bytes, options: ParserOptions = DEFAULT_OPTIONS):
        self.scanner = ByteScanner(data)
        self.options = options
        self._sigil = options.sigil_byte

    def parse(self) -> List[Syntax]:
        """
        Разбирает весь буфер.

        Returns:
            Узлы верхнего уровня в порядке следования

        Raises:
            ParseError: При синтаксической ошибке. Ошибка во вложенном
                буфере пробрасывается как есть, с координатами этого буфера.
        """
        ast: List[Syntax] = []

        start = self.scanner.offset
        try:
            while True:
                syntax = self._extract_syntax()
                if syntax is None:
                    break
                start = self.scanner.offset
                ast.append(syntax)
        except LeafSyntaxError as e:
            source = Source(
                line=self.scanner.line,
                column=self.scanner.column,
                range=range(start, self.scanner.offset),
            )
            _LOG.debug("Parse failed at %d:%d (bytes %d..%d): %s",
                       source.line, source.column, start, self.scanner.offset, e.message)
            raise ParseError(source, e) from e

        return ast

    # Элементы верхнего уровня

    def _extract_syntax(self) -> Optional[Syntax]:
        byte = self.scanner.peek()
        if byte is None:
            return None

        if byte == self._sigil:
            return self._extract_tag()

        start = self.scanner.offset
        line = self.scanner.line
        column = self.scanner.column

        data = self._bytes_until(self._sigil)

        source = Source(line=line, column=column, range=range(start, self.scanner.offset))
        return Syntax(kind=Raw(data=data), source=source)

    def _extract_tag(self) -> Syntax:
        start = self.scanner.offset
        line = self.scanner.line
        column = self.scanner.column

        self._expect(self._sigil)
        name = self._extract_identifier()
        parameters = self._extract_parameters()
        self._skip_whitespace()

        body: Optional[Tuple[Syntax, ...]] = None
        if self.scanner.peek() == LEFT_CURLY_BRACKET:
            body = self._extract_body()

        kind = Tag(name=name, parameters=parameters, body=body)
        source = Source(line=line, column=column, range=range(start, self.scanner.offset))
        return Syntax(kind=kind, source=source)

    def _extract_body(self) -> Tuple[Syntax, ...]:
        self._expect(LEFT_CURLY_BRACKET)
        opener = LEFT_CURLY_BRACKET if self.options.balanced_bodies else None
        data = self._bytes_until(RIGHT_CURLY_BRACKET, opener=opener)
        self._expect(RIGHT_CURLY_BRACKET)
        return self._parse_nested(data, "body")

    def _parse_nested(self, data: bytes, what: str) -> Tuple[Syntax, ...]:
        _LOG.debug("Parsing nested %s (%d bytes)", what, len(data))
        return tuple(Parser(data, self.options).parse())

    # Сканирование байтов с экранированием

    def _bytes_until(self, delimiter: int, opener: Optional[int] = None) -> bytes:
        """
        Копирует байты до первого вхождения delimiter, перед которым нет `\\`.

        Пара `\\` + delimiter превращается в delimiter. Перед любым другим
        байтом обратный слэш остаётся как есть. Если задан opener, каждое
        его вхождение требует ещё одного неэкранированного delimiter.
        """
        out = bytearray()
        escaped = False
        depth = 0

        while True:
            byte = self.scanner.peek()
            if byte is None:
                break
            if byte == delimiter and not escaped:
                if depth == 0:
                    break
                depth -= 1
            elif opener is not None and byte == opener:
                depth += 1

            self.scanner.pop()
            if escaped and byte != delimiter:
                out.append(BACKSLASH)
            if byte != BACKSLASH:
                out.append(byte)
            escaped = byte == BACKSLASH

        # Обратный слэш в самом конце буфера
        if escaped:
            out.append(BACKSLASH)

        return bytes(out)

    # Токены

    def _extract_identifier(self) -> Syntax:
        start = self.scanner.offset
        line = self.scanner.line
        column = self.scanner.column

        while True:
            byte = self.scanner.peek()
            if byte is None or not is_alphanumeric(byte):
                break
            self.scanner.pop()

        name = make_string(self.scanner.slice(start, self.scanner.offset))
        source = Source(line=line, column=column, range=range(start, self.scanner.offset))
        return Syntax(kind=Identifier(name=name), source=source)

    def _extract_number(self) -> Union[IntConstant, DoubleConstant]:
        start = self.scanner.offset
        while True:
            byte = self.scanner.peek()
            if byte is None or not (is_digit(byte) or byte == PERIOD):
                break
            self.scanner.pop()

        text = make_string(self.scanner.slice(start, self.scanner.offset))
        if "." in text:
            try:
                return DoubleConstant(value=float(text))
            except ValueError:
                raise LeafSyntaxError.invalid_numeric_literal(text, "double") from None
        try:
            return IntConstant(value=int(text))
        except ValueError:
            raise LeafSyntaxError.invalid_numeric_literal(text, "int") from None

    # Параметры

    def _extract_parameters(self) -> Tuple[Syntax, ...]:
        self._expect(LEFT_PARENTHESIS)

        params: List[Syntax] = []
        while True:
            if params:
                self._expect(COMMA)

            param = self._extract_parameter()
            if param is not None:
                params.append(param)
            elif params:
                # Запятая перед `)`
                raise LeafSyntaxError.unexpected_byte(None, self.scanner.peek(), what="parameter")

            if self.scanner.peek() != COMMA:
                break

        self._expect(RIGHT_PARENTHESIS)

        return tuple(params)

    def _extract_parameter(self) -> Optional[Syntax]:
        """
        Разбирает один параметр.

        Возвращает None, если следующий байт `)` (список закончился).
        """
        self._skip_whitespace()

        start = self.scanner.offset
        line = self.scanner.line
        column = self.scanner.column

        byte = self.scanner.peek()
        if byte is None:
            raise LeafSyntaxError.end_of_input()

        kind: SyntaxKind

        if byte == RIGHT_PARENTHESIS:
            return None
        elif byte == QUOTE:
            self._expect(QUOTE)
            data = self._bytes_until(QUOTE)
            self._expect(QUOTE)
            kind = StringConstant(syntax=self._parse_nested(data, "string"))
        elif is_digit(byte):
            kind = self._extract_number()
        else:
            identifier = self._extract_identifier()
            if identifier.source.range.start == identifier.source.range.stop:
                raise LeafSyntaxError.unexpected_byte(None, byte, what="parameter")

            self._skip_whitespace()

            op = Operator.from_byte(self.scanner.peek())
            if op is not None:
                self.scanner.pop()
                self._skip_whitespace()

                following = self.scanner.peek()
                if following is not None and not _starts_parameter(following):
                    raise LeafSyntaxError.missing_operand()

                right = self._extract_parameter()
                if right is None:
                    raise LeafSyntaxError.missing_operand()

                kind = Expression(operator=op, left=identifier, right=right)
            else:
                kind = identifier.kind

        source = Source(line=line, column=column, range=range(start, self.scanner.offset))
        return Syntax(kind=kind, source=source)

    # Вспомогательные методы

    def _skip_whitespace(self) -> None:
        while self.scanner.peek() == SPACE:
            self.scanner.pop()

    def _expect(self, expected: int) -> None:
        """Потребляет ожидаемый байт или выбрасывает ошибку."""
        byte = self.scanner.peek()
        if byte is None:
            raise LeafSyntaxError.end_of_input()
        if byte != expected:
            raise LeafSyntaxError.unexpected_byte(expected, byte)
        self.scanner.pop()


def parse(data: Union[bytes, bytearray, memoryview, str], options: Optional[ParserOptions] = None) -> List[Syntax]:
    """
    Удобная функция для разбора шаблона.

    Args:
        data: Исходный текст шаблона; строка кодируется в UTF-8
        options: Параметры грамматики (по умолчанию базовые)

    Returns:
        Список узлов верхнего уровня

    Raises:
        ParseError: При ошибке синтаксического анализа
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return Parser(bytes(data), options or DEFAULT_OPTIONS).parse()


def parse_file(path: Path, options: Optional[ParserOptions] = None) -> List[Syntax]:
    """Разбирает шаблон из файла (байты читаются как есть)."""
    _LOG.debug("Parsing template file %s", path)
    return parse(path.read_bytes(), options)


__all__ = ["Parser", "parse", "parse_file"]
