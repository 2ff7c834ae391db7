"""
linetok.finder — THE BOUNDARY FILE
==================================
Package boundary. Exports public API only.
Everything inside _core/ is private and should NOT be imported directly,
except through the names re-exported here.

PUBLIC API:
  TokenFinder           — main class (find / capture / register)
  FinderConfig          — typed config builder
  TokenRegistry         — ordered token type → pattern mapping
  find_nth              — Nth non-overlapping match on one line
  select_by_type        — fixed-type selection
  select_any            — any-type selection, first registered type wins
  BaseCaptureStore      — base class for custom capture stores
  MemoryCaptureStore    — bounded in-memory kill-ring
  DEFAULT_TOKEN_PATTERNS— built-in (type, pattern) list
"""

from linetok.finder.token_finder import TokenFinder
from linetok.finder.config.finder_config import FinderConfig
from linetok.finder._core.registry.token_registry import TokenRegistry
from linetok.finder._core.registry.default_patterns import DEFAULT_TOKEN_PATTERNS
from linetok.finder._core.matcher.line_matcher import find_nth, iter_matches, count_matches
from linetok.finder._core.selection.strategy import select, select_any, select_by_type
from linetok.finder._core.capture.backends import BaseCaptureStore, MemoryCaptureStore


__all__ = [
    "TokenFinder",
    "FinderConfig",
    "TokenRegistry",
    "DEFAULT_TOKEN_PATTERNS",
    "find_nth",
    "iter_matches",
    "count_matches",
    "select",
    "select_any",
    "select_by_type",
    "BaseCaptureStore",
    "MemoryCaptureStore",
]
