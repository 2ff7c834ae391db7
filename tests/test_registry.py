"""
linetok — Token Registry Tests
==============================
Run with: python -m pytest tests/ -v
"""

import sys
import os
import threading
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
import regex

from linetok.core.data_types import Pattern
from linetok.core.exceptions import InvalidPatternError, UnknownTokenTypeError
from linetok.finder import DEFAULT_TOKEN_PATTERNS, TokenRegistry


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def registry():
    return TokenRegistry.from_pairs([
        ("ip",     r"\b(?:[0-9]{1,3}\.){3}[0-9]{1,3}\b"),
        ("email",  r"\b[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}\b"),
        ("number", r"\b[0-9]+\b"),
    ])


# ── Register / Lookup ─────────────────────────────────────────────────────────

class TestRegister:
    def test_register_returns_pattern(self):
        pattern = TokenRegistry().register("number", r"\b[0-9]+\b")
        assert isinstance(pattern, Pattern)
        assert pattern.source == r"\b[0-9]+\b"
        assert pattern.compiled.search("x 12").group(0) == "12"

    def test_lookup(self, registry):
        assert registry.lookup("number").source == r"\b[0-9]+\b"

    def test_new_types_append(self, registry):
        registry.register("date", r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
        assert registry.list_types() == ["ip", "email", "number", "date"]

    def test_replace_keeps_position(self, registry):
        registry.register("ip", r"[0-9.]+")
        assert registry.list_types() == ["ip", "email", "number"]
        assert registry.lookup("ip").source == r"[0-9.]+"

    def test_flags_are_applied(self):
        registry = TokenRegistry()
        registry.register("word", "abc", regex.IGNORECASE)
        assert registry.lookup("word").compiled.search("xABC") is not None

    def test_empty_type_name_rejected(self):
        with pytest.raises(ValueError):
            TokenRegistry().register("", "x")

    def test_contains_and_len(self, registry):
        assert "email" in registry
        assert "url" not in registry
        assert len(registry) == 3
        assert list(registry) == ["ip", "email", "number"]


# ── Failures ──────────────────────────────────────────────────────────────────

class TestFailures:
    def test_bad_pattern_raises(self):
        with pytest.raises(InvalidPatternError):
            TokenRegistry().register("number", "[")

    def test_bad_pattern_leaves_entry_unchanged(self, registry):
        before = registry.lookup("number")
        with pytest.raises(InvalidPatternError) as info:
            registry.register("number", "[")
        assert registry.lookup("number") is before
        assert registry.list_types() == ["ip", "email", "number"]
        assert info.value.details["token_type"] == "number"

    def test_bad_pattern_does_not_insert(self, registry):
        with pytest.raises(InvalidPatternError):
            registry.register("broken", "(unclosed")
        assert "broken" not in registry

    def test_non_string_pattern_raises(self):
        with pytest.raises(InvalidPatternError):
            TokenRegistry().register("number", 42)

    def test_unknown_type_raises(self, registry):
        with pytest.raises(UnknownTokenTypeError) as info:
            registry.lookup("uuid")
        assert info.value.details["known"] == ["ip", "email", "number"]

    def test_empty_registry_lists_nothing(self):
        assert TokenRegistry().list_types() == []
        assert TokenRegistry().snapshot() == ()


# ── Defaults ──────────────────────────────────────────────────────────────────

class TestDefaultPatterns:
    def test_default_order(self):
        assert [name for name, _ in DEFAULT_TOKEN_PATTERNS] == [
            "ip", "email", "url", "date", "number",
        ]

    def test_defaults_compile(self):
        registry = TokenRegistry.from_pairs(DEFAULT_TOKEN_PATTERNS)
        assert len(registry) == len(DEFAULT_TOKEN_PATTERNS)

    def test_date_alternation_is_literal(self):
        # leading \b binds to the ISO branch only, trailing \b to the slashed one
        date = TokenRegistry.from_pairs(DEFAULT_TOKEN_PATTERNS).lookup("date").compiled
        assert date.search("2024-01-315").group(0) == "2024-01-31"
        assert date.search("131/01/2024").group(0) == "31/01/2024"


# ── Concurrency ───────────────────────────────────────────────────────────────

class TestConcurrency:
    def test_readers_never_see_partial_entries(self):
        registry = TokenRegistry()
        registry.register("number", "[0-9]+")
        sources = {"[0-9]+", r"\b[0-9]+\b"}
        seen = []
        stop = threading.Event()

        def writer():
            flip = True
            while not stop.is_set():
                registry.register("number", "[0-9]+" if flip else r"\b[0-9]+\b")
                flip = not flip

        def reader():
            for _ in range(2000):
                pattern = registry.lookup("number")
                seen.append(pattern.source in sources and pattern.compiled is not None)
                assert registry.list_types() == ["number"]

        w = threading.Thread(target=writer)
        readers = [threading.Thread(target=reader) for _ in range(4)]
        w.start()
        for r in readers:
            r.start()
        for r in readers:
            r.join()
        stop.set()
        w.join()
        assert all(seen)
        assert len(seen) == 8000
