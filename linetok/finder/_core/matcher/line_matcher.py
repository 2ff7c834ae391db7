"""
linetok.finder._core.matcher.line_matcher
=========================================
Finds the Nth non-overlapping match of a pattern inside one line.

Scan rule: search left to right; each next search starts where the previous
match ended. An empty match moves the cursor one character past itself so
the scan always makes progress.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

from linetok.core.data_types import Line, MatchSpan, Pattern
from linetok.core.exceptions import InvalidOccurrenceError


LineLike = Union[str, Line]


def check_occurrence(n: object) -> int:
    """
    Validate an occurrence index and return it.

    Raises
    ------
    InvalidOccurrenceError
        If n is not an int (bools excluded) or is less than 1.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidOccurrenceError(
            f"Occurrence index must be an int, got {type(n).__name__}",
            details={"n": n},
        )
    if n < 1:
        raise InvalidOccurrenceError(
            f"Occurrence index must be >= 1, got {n}",
            details={"n": n},
        )
    return n


def _line_text(line: LineLike) -> str:
    if isinstance(line, Line):
        return line.text
    if isinstance(line, str):
        return Line(line).text
    raise TypeError(f"line must be str or Line, got {type(line).__name__}")


def iter_matches(
    line: LineLike,
    pattern: Pattern,
    token_type: Optional[str] = None,
) -> Iterator[MatchSpan]:
    """
    Yield every non-overlapping match of pattern in line, left to right.

    Parameters
    ----------
    line : str or Line
        The line to scan. A str is wrapped in Line (trailing newline stripped).
    pattern : Pattern
        The compiled pattern to search for.
    token_type : str or None
        Stamped on every yielded MatchSpan.
    """
    text = _line_text(line)
    compiled = pattern.compiled
    end_of_line = len(text)
    pos = 0

    while pos <= end_of_line:
        m = compiled.search(text, pos, end_of_line)
        if m is None:
            return
        start, end = m.span()
        yield MatchSpan(start=start, end=end, text=m.group(0), token_type=token_type)
        pos = end + 1 if end == start else end


def find_nth(
    line: LineLike,
    pattern: Pattern,
    n: int,
    token_type: Optional[str] = None,
) -> Optional[MatchSpan]:
    """
    Return the span of the Nth match of pattern in line.

    Parameters
    ----------
    line : str or Line
        The line to scan.
    pattern : Pattern
        The compiled pattern to search for.
    n : int
        1-based occurrence index; 1 means the first match.
    token_type : str or None
        Stamped on the returned MatchSpan.

    Returns
    -------
    MatchSpan or None
        None when the line has fewer than n matches. That is a normal
        outcome, not an error.

    Raises
    ------
    InvalidOccurrenceError
        If n < 1 or n is not an int. Raised before the pattern runs.
    """
    check_occurrence(n)
    for seen, span in enumerate(iter_matches(line, pattern, token_type), start=1):
        if seen == n:
            return span
    return None


def count_matches(line: LineLike, pattern: Pattern) -> int:
    """Return the number of non-overlapping matches of pattern in line."""
    return sum(1 for _ in iter_matches(line, pattern))
