"""
Tests for the byte scanner.
"""

import pytest

from leaf.errors import LeafSyntaxError, SyntaxErrorKind
from leaf.scanner import ByteScanner


class TestByteScanner:

    def test_empty_buffer(self):
        """Peek on empty buffer returns None"""
        scanner = ByteScanner(b"")
        assert scanner.peek() is None
        assert scanner.offset == 0
        assert (scanner.line, scanner.column) == (1, 1)

    def test_peek_does_not_consume(self):
        scanner = ByteScanner(b"ab")
        assert scanner.peek() == ord("a")
        assert scanner.peek() == ord("a")
        assert scanner.offset == 0

    def test_pop_advances_column(self):
        scanner = ByteScanner(b"ab")
        assert scanner.pop() == ord("a")
        assert scanner.offset == 1
        assert (scanner.line, scanner.column) == (1, 2)
        assert scanner.peek() == ord("b")

    def test_newline_resets_column(self):
        """Newline increments line and resets column"""
        scanner = ByteScanner(b"a\nb")
        scanner.pop()
        scanner.pop()
        assert (scanner.line, scanner.column) == (2, 1)
        scanner.pop()
        assert (scanner.line, scanner.column) == (2, 2)
        assert scanner.peek() is None

    def test_pop_at_end_raises(self):
        scanner = ByteScanner(b"x")
        scanner.pop()
        with pytest.raises(LeafSyntaxError) as exc_info:
            scanner.pop()
        assert exc_info.value.kind == SyntaxErrorKind.END_OF_INPUT

    def test_slice_by_absolute_offset(self):
        scanner = ByteScanner(b"hello world")
        assert scanner.slice(6, 11) == b"world"
