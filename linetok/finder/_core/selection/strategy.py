"""
linetok.finder._core.selection.strategy
=======================================
The two selection modes built on the line matcher.

  fixed-type : match one named token type
  any-type   : try every registered type in registration order and return
               the first one that has an Nth match

Any-type mode is first-match-wins, not best-match: once a type succeeds the
remaining types are never evaluated, even if one of them would also match
(or match earlier in the line). Reordering the registry changes the winner.
"""

from __future__ import annotations

from typing import Optional, Tuple

from linetok.core.data_types import ANY, MatchSpan
from linetok.finder._core.matcher.line_matcher import LineLike, check_occurrence, find_nth
from linetok.finder._core.registry.token_registry import TokenRegistry


def select_by_type(
    line: LineLike,
    registry: TokenRegistry,
    token_type: str,
    n: int = 1,
) -> Optional[MatchSpan]:
    """
    Return the Nth match of one token type, or None.

    Raises
    ------
    InvalidOccurrenceError
        If n < 1 (checked before the registry is consulted).
    UnknownTokenTypeError
        If token_type is not registered.
    """
    check_occurrence(n)
    pattern = registry.lookup(token_type)
    return find_nth(line, pattern, n, token_type=token_type)


def select_any(
    line: LineLike,
    registry: TokenRegistry,
    n: int = 1,
) -> Optional[Tuple[str, MatchSpan]]:
    """
    Return (token_type, span) for the first registered type with an Nth match.

    Returns None if no type matches or the registry is empty.

    Raises
    ------
    InvalidOccurrenceError
        If n < 1 (checked before any pattern is evaluated).
    """
    check_occurrence(n)
    for token_type, pattern in registry.snapshot():
        span = find_nth(line, pattern, n, token_type=token_type)
        if span is not None:
            return token_type, span
    return None


def select(
    line: LineLike,
    registry: TokenRegistry,
    token_type: str = ANY,
    n: int = 1,
) -> Optional[Tuple[str, MatchSpan]]:
    """Dispatch to select_any() for ANY, otherwise select_by_type()."""
    if token_type == ANY:
        return select_any(line, registry, n)
    span = select_by_type(line, registry, token_type, n)
    if span is None:
        return None
    return token_type, span
