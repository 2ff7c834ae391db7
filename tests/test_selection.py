"""
linetok — Selection Strategy Tests
==================================
Run with: python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from linetok.core.data_types import ANY, Pattern
from linetok.core.exceptions import InvalidOccurrenceError, UnknownTokenTypeError
from linetok.finder import TokenRegistry, select, select_any, select_by_type
from linetok.finder._core.registry.token_registry import compile_pattern


IP     = r"\b(?:[0-9]{1,3}\.){3}[0-9]{1,3}\b"
EMAIL  = r"\b[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}\b"
DATE   = r"\b[0-9]{4}-[0-9]{2}-[0-9]{2}|[0-9]{2}/[0-9]{2}/[0-9]{4}\b"
NUMBER = r"\b[0-9]+\b"


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def registry():
    return TokenRegistry.from_pairs([
        ("ip", IP), ("email", EMAIL), ("date", DATE), ("number", NUMBER),
    ])


class _ExplodingSearch:
    """Stand-in compiled pattern that fails the test if it is ever searched."""
    def search(self, *args, **kwargs):
        raise AssertionError("pattern was evaluated")


class _SnapshotRegistry:
    """Registry double serving a fixed snapshot."""
    def __init__(self, entries):
        self._entries = tuple(entries)

    def snapshot(self):
        return self._entries

    def lookup(self, token_type):
        return dict(self._entries)[token_type]


# ── Fixed-type mode ───────────────────────────────────────────────────────────

class TestSelectByType:
    def test_first_number(self, registry):
        span = select_by_type("call 555 or 42 today", registry, "number", 1)
        assert (span.text, span.start, span.end) == ("555", 5, 8)
        assert span.token_type == "number"

    def test_second_number(self, registry):
        span = select_by_type("call 555 or 42 today", registry, "number", 2)
        assert (span.text, span.start, span.end) == ("42", 12, 14)

    def test_third_number_absent(self, registry):
        assert select_by_type("call 555 or 42 today", registry, "number", 3) is None

    def test_default_n_is_first(self, registry):
        assert select_by_type("ping 10.0.0.1", registry, "ip").text == "10.0.0.1"

    def test_unknown_type_propagates(self, registry):
        with pytest.raises(UnknownTokenTypeError):
            select_by_type("anything", registry, "uuid", 1)

    def test_invalid_n_checked_before_lookup(self, registry):
        with pytest.raises(InvalidOccurrenceError):
            select_by_type("anything", registry, "uuid", 0)

    def test_invalid_n_before_pattern_runs(self):
        spy = _SnapshotRegistry([("number", Pattern("x", _ExplodingSearch()))])
        with pytest.raises(InvalidOccurrenceError):
            select_by_type("1 2 3", spy, "number", -1)


# ── Any-type mode ─────────────────────────────────────────────────────────────

class TestSelectAny:
    def test_email_wins(self, registry):
        result = select_any("contact a@b.com now", registry, 1)
        assert result is not None
        token_type, span = result
        assert token_type == "email"
        assert span.text == "a@b.com"
        assert (span.start, span.end) == (8, 15)

    def test_nothing_matches(self, registry):
        assert select_any("no tokens here", registry, 1) is None

    def test_empty_registry(self):
        assert select_any("call 555", TokenRegistry(), 1) is None

    def test_earlier_registration_wins(self):
        digits_first = TokenRegistry.from_pairs([("digits", "[0-9]+"), ("number", NUMBER)])
        number_first = TokenRegistry.from_pairs([("number", NUMBER), ("digits", "[0-9]+")])
        assert select_any("id 4711", digits_first)[0] == "digits"
        assert select_any("id 4711", number_first)[0] == "number"

    def test_first_match_wins_not_leftmost(self, registry):
        # number matches earlier in the line, but date is registered first
        token_type, span = select_any("build 88 on 2024-01-31", registry, 1)
        assert token_type == "date"
        assert span.text == "2024-01-31"

    def test_later_types_never_tried(self):
        spy = _SnapshotRegistry([
            ("number", compile_pattern(NUMBER)),
            ("never",  Pattern("x", _ExplodingSearch())),
        ])
        token_type, span = select_any("call 555", spy, 1)
        assert (token_type, span.text) == ("number", "555")

    def test_nth_falls_through_to_next_type(self, registry):
        # only one IP, so n=2 moves on to the numbers
        token_type, span = select_any("10.0.0.1 and 7", registry, 2)
        assert token_type == "number"
        assert span.text == "0"

    @pytest.mark.parametrize("n", [0, -3])
    def test_invalid_n_before_any_pattern(self, n):
        spy = _SnapshotRegistry([("never", Pattern("x", _ExplodingSearch()))])
        with pytest.raises(InvalidOccurrenceError):
            select_any("1 2 3", spy, n)

    def test_invalid_n_on_empty_registry(self):
        with pytest.raises(InvalidOccurrenceError):
            select_any("1 2 3", TokenRegistry(), 0)

    def test_reordering_changes_winner(self, registry):
        line = "host 10.1.2.3"
        assert select_any(line, registry)[0] == "ip"
        reordered = TokenRegistry.from_pairs([("number", NUMBER), ("ip", IP)])
        assert select_any(line, reordered)[0] == "number"


# ── Dispatcher ────────────────────────────────────────────────────────────────

class TestSelect:
    def test_any_dispatch(self, registry):
        assert select("contact a@b.com now", registry, ANY)[0] == "email"

    def test_fixed_dispatch(self, registry):
        token_type, span = select("call 555 or 42 today", registry, "number", 2)
        assert (token_type, span.text) == ("number", "42")

    def test_fixed_dispatch_no_match(self, registry):
        assert select("call 555", registry, "email") is None
