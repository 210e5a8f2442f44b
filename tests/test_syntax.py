"""Тесты для узлов дерева и их текстового представления."""
import dataclasses

import pytest

from leaf import parse
from leaf.syntax import (
    DoubleConstant, Expression, Identifier, IntConstant, Operator, Raw,
    Source, StringConstant, Syntax, Tag, describe,
)


def _node(kind, start=0, stop=0):
    return Syntax(kind=kind, source=Source(line=1, column=1, range=range(start, stop)))


class TestOperator:

    @pytest.mark.parametrize("char, op", [
        ("+", Operator.ADD),
        ("-", Operator.SUBTRACT),
        ("<", Operator.LESS_THAN),
        (">", Operator.GREATER_THAN),
    ])
    def test_from_byte(self, char, op):
        assert Operator.from_byte(ord(char)) is op

    def test_from_other_byte(self):
        assert Operator.from_byte(ord("*")) is None
        assert Operator.from_byte(None) is None

    def test_str(self):
        assert str(Operator.LESS_THAN) == "lessThan"


class TestSyntaxNodes:

    def test_nodes_are_immutable(self):
        node = _node(Identifier(name="a"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.kind = Identifier(name="b")  # type: ignore[misc]

    def test_equality_ignores_identity(self):
        assert _node(Raw(data=b"x"), 0, 1) == _node(Raw(data=b"x"), 0, 1)
        assert _node(Raw(data=b"x"), 0, 1) != _node(Raw(data=b"x"), 0, 2)

    def test_nodes_are_hashable(self):
        tag = _node(Tag(name=_node(Identifier(name="a")), parameters=(), body=None))
        assert len({tag, tag}) == 1


class TestDescription:

    def test_raw(self):
        assert str(_node(Raw(data=b"hi"))) == "Raw: `hi`"

    def test_constants(self):
        assert str(_node(IntConstant(value=1))) == "c:1"
        assert str(_node(DoubleConstant(value=2.5))) == "c:2.5"
        inner = (_node(Raw(data=b"x")),)
        assert str(_node(StringConstant(syntax=inner))) == "c:(Raw: `x`)"

    def test_expression(self):
        expr = Expression(
            operator=Operator.SUBTRACT,
            left=_node(Identifier(name="b")),
            right=_node(Identifier(name="c")),
        )
        assert str(_node(expr)) == "Expr: (`b` subtract `c`)"

    def test_tag_from_parse(self):
        ast = parse(b'#a(1, 2.5, "x")')
        assert str(ast[0]) == "Tag: `a`(c:1, c:2.5, c:(Raw: `x`)) Body: False"

    def test_describe_sequence(self):
        ast = parse(b"hi #a(){x}")
        assert describe(ast) == "Raw: `hi `\nTag: `a`() Body: True"
