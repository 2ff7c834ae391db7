"""
linetok.core.data_types
=======================
Core data structures used throughout linetok.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import regex


# Reserved token type requesting any-type selection.
ANY = "any"


# ── Pattern ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Pattern:
    """
    A compiled regular expression together with its canonical source.

    Attributes:
        source   : The pattern text exactly as it was registered.
        compiled : The compiled `regex` pattern used for matching.
        flags    : Compile flags (0 unless the configuration asked for some).
    """
    source:   str
    compiled: regex.Pattern
    flags:    int = 0

    def __repr__(self) -> str:
        return f"Pattern({self.source!r})"


# ── Match Span ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MatchSpan:
    """
    Half-open [start, end) span of one match inside a line.

    Attributes:
        start      : Offset of the first matched character.
        end        : Offset one past the last matched character.
        text       : The matched substring, line[start:end].
        token_type : The token type that produced the match. None when a
                     bare pattern was matched outside of a registry.
    """
    start:      int
    end:        int
    text:       str
    token_type: Optional[str] = None

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        # An empty match is still a match; absence is None.
        return True

    def shifted(self, offset: int) -> "MatchSpan":
        """Return a copy of this span moved by offset characters."""
        return MatchSpan(
            start      = self.start + offset,
            end        = self.end + offset,
            text       = self.text,
            token_type = self.token_type,
        )


# ── Line ──────────────────────────────────────────────────────────────────────

_TERMINATORS = ("\r\n", "\n", "\r")


@dataclass(frozen=True)
class Line:
    """
    Immutable view of a single line of text.

    Attributes:
        text   : The line content, without any line terminator.
        offset : Where the line starts in the surrounding buffer
                 (0 for a standalone line).

    A single trailing terminator is stripped; an embedded newline raises
    ValueError, since matching never crosses into an adjacent line.
    """
    text:   str
    offset: int = 0

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"Line text must be str, got {type(self.text).__name__}")
        text = self.text
        for term in _TERMINATORS:
            if text.endswith(term):
                text = text[: -len(term)]
                break
        if "\n" in text or "\r" in text:
            raise ValueError("Line text must not contain an embedded line break.")
        object.__setattr__(self, "text", text)

    @classmethod
    def at(cls, buffer: str, point: int) -> "Line":
        """
        Return the line of `buffer` that contains offset `point`.

        A point sitting on a newline belongs to the line that the newline ends.
        """
        if not 0 <= point <= len(buffer):
            raise ValueError(
                f"point {point} is outside the buffer (length {len(buffer)})"
            )
        start = buffer.rfind("\n", 0, point) + 1
        end   = buffer.find("\n", point)
        if end == -1:
            end = len(buffer)
        return cls(text=buffer[start:end], offset=start)

    @property
    def bounds(self) -> tuple:
        """(0, len(text)): the searchable range of this line."""
        return (0, len(self.text))

    def to_buffer(self, span: MatchSpan) -> MatchSpan:
        """Translate a line-relative span into buffer offsets."""
        return span.shifted(self.offset)

    def __len__(self) -> int:
        return len(self.text)

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.text


# ── Capture Result ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CaptureResult:
    """
    Returned by TokenFinder.capture().

    Attributes:
        token_type : Winning token type.
        span       : Line-relative span of the captured token.
        buffer_span: The same span in buffer coordinates (equal to `span`
                     when the line was given on its own).
        message    : Confirmation message, or None when verbose is off.
    """
    token_type:  str
    span:        MatchSpan
    buffer_span: MatchSpan
    message:     Optional[str] = None

    @property
    def text(self) -> str:
        return self.span.text
