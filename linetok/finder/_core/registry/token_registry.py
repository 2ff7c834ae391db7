"""
linetok.finder._core.registry.token_registry
============================================
Ordered mapping from token type to compiled Pattern.

Registration order is the trial order of any-type selection, so it is kept
explicitly: new types append, re-registered types keep their slot.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, Iterator, List, Tuple

import regex

from linetok.core.data_types import Pattern
from linetok.core.exceptions import InvalidPatternError, UnknownTokenTypeError


def compile_pattern(source: str, flags: int = 0) -> Pattern:
    """
    Compile a pattern source into a Pattern value.

    Raises
    ------
    InvalidPatternError
        If the source is not a string or fails to compile.
    """
    if not isinstance(source, str):
        raise InvalidPatternError(
            f"Pattern source must be a string, got {type(source).__name__}",
            details={"pattern": repr(source)},
        )
    try:
        compiled = regex.compile(source, flags)
    except regex.error as exc:
        raise InvalidPatternError(
            f"Pattern does not compile: {source!r}",
            details={"error": str(exc)},
        ) from exc
    return Pattern(source=source, compiled=compiled, flags=flags)


class TokenRegistry:
    """
    Ordered, thread-safe token type → Pattern registry.

    Entries are immutable Pattern values. A write compiles the new pattern
    first and then swaps the entry under the lock, so a concurrent reader
    sees either the old Pattern or the new one, never a half-built entry.

    Usage
    -----
    registry = TokenRegistry()
    registry.register("number", r"\\b[0-9]+\\b")
    registry.register("email",  r"\\b[\\w.%+-]+@[\\w.-]+\\.[A-Za-z]{2,}\\b")
    registry.list_types()        # → ["number", "email"]
    registry.lookup("number")    # → Pattern('\\b[0-9]+\\b')
    """

    def __init__(self):
        # dict keeps insertion order and replacing a value keeps its slot
        self._entries: Dict[str, Pattern] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "TokenRegistry":
        """Build a registry from ordered (token_type, pattern_source) pairs."""
        registry = cls()
        for token_type, source in pairs:
            registry.register(token_type, source)
        return registry

    def register(self, token_type: str, pattern_source: str, flags: int = 0) -> Pattern:
        """
        Compile and insert (or replace) the pattern for a token type.

        Parameters
        ----------
        token_type : str
            Non-empty identifier for the token type.
        pattern_source : str
            Regular expression text, taken verbatim.
        flags : int
            Optional `regex` compile flags.

        Returns
        -------
        Pattern
            The newly stored pattern.

        Raises
        ------
        InvalidPatternError
            If the pattern does not compile. The registry is left unchanged.
        ValueError
            If token_type is empty or not a string.
        """
        if not isinstance(token_type, str) or not token_type:
            raise ValueError(f"token_type must be a non-empty string, got {token_type!r}")

        try:
            pattern = compile_pattern(pattern_source, flags)
        except InvalidPatternError as exc:
            exc.details.setdefault("token_type", token_type)
            raise

        with self._lock:
            self._entries[token_type] = pattern
        return pattern

    def lookup(self, token_type: str) -> Pattern:
        """
        Return the Pattern registered for token_type.

        Raises
        ------
        UnknownTokenTypeError
            If token_type is not registered.
        """
        with self._lock:
            pattern = self._entries.get(token_type)
            if pattern is None:
                raise UnknownTokenTypeError(
                    f"Unknown token type: {token_type!r}",
                    details={"known": list(self._entries)},
                )
            return pattern

    def list_types(self) -> List[str]:
        """Return registered token types in registration order ([] if empty)."""
        with self._lock:
            return list(self._entries)

    def snapshot(self) -> Tuple[Tuple[str, Pattern], ...]:
        """Return an ordered, consistent copy of all (token_type, Pattern) entries."""
        with self._lock:
            return tuple(self._entries.items())

    def __contains__(self, token_type: object) -> bool:
        with self._lock:
            return token_type in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_types())

    def __repr__(self) -> str:
        return f"TokenRegistry({self.list_types()})"
