"""Unit tests for :mod:`tendero.entrypoints.cli.helpers.messages`.

Glyphs follow the encoding of stderr as reported by Click, and every
status line goes to stderr so stdout stays clean.
"""

import io
from decimal import Decimal

import click
import pytest

from tendero.entrypoints.cli.helpers import messages
from tendero.entrypoints.cli.helpers.messages import error, format_money, success, warn


class FakeStderr(io.StringIO):
    """Text stream with a controllable encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding


@pytest.fixture
def stderr_encoding(monkeypatch):
    """Make Click report the given stderr encoding."""

    def _set(encoding: str) -> None:
        stream = FakeStderr(encoding)
        monkeypatch.setattr(click, "get_text_stream", lambda name: stream)

    return _set


@pytest.mark.parametrize(
    "encoding, expected",
    [
        ("utf-8", {"caution": "⚠️", "success": "✅", "error": "❌"}),
        ("ascii", {"caution": "[!]", "success": "[OK]", "error": "[X]"}),
    ],
)
def test_glyph_follows_stderr_encoding(stderr_encoding, encoding, expected):
    """Emoji when stderr can encode them, ASCII markers otherwise."""
    stderr_encoding(encoding)
    assert {kind: messages.glyph(kind) for kind in expected} == expected


@pytest.mark.parametrize(
    "emit, marker, text",
    [(warn, "[!]", "careful"), (success, "[OK]", "done"), (error, "[X]", "failed")],
)
def test_messages_go_to_stderr(stderr_encoding, capsys, emit, marker, text):
    """Status lines are written to stderr only."""
    stderr_encoding("ascii")
    emit(text)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"{marker}  {text}" in captured.err


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("0"), "$0"),
        (Decimal("3000"), "$3,000"),
        (Decimal("1234567.5"), "$1,234,567.50"),
        (Decimal("-1000"), "-$1,000"),
        (Decimal("12.3"), "$12.30"),
    ],
)
def test_format_money(amount, expected):
    """Thousands separators, cents only when there are any, sign up front."""
    assert format_money(amount) == expected
