"""
linetok.finder._core.registry.default_patterns
==============================================
Built-in token patterns used when the configuration names none.

These are data, not engine logic. Order matters: any-type selection tries
them top to bottom and the first type with an Nth match wins, so the more
specific shapes come before the bare number.
"""

from __future__ import annotations

from typing import List, Tuple


# ── Pattern Registry ──────────────────────────────────────────────────────────
# Each entry: (TOKEN_TYPE, pattern_source)

DEFAULT_TOKEN_PATTERNS: List[Tuple[str, str]] = []


# ── IPv4 ──────────────────────────────────────────────────────────────────────
IP_SOURCE = r"\b(?:[0-9]{1,3}\.){3}[0-9]{1,3}\b"
DEFAULT_TOKEN_PATTERNS.append(("ip", IP_SOURCE))


# ── Email ─────────────────────────────────────────────────────────────────────
EMAIL_SOURCE = r"\b[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}\b"
DEFAULT_TOKEN_PATTERNS.append(("email", EMAIL_SOURCE))


# ── URL ───────────────────────────────────────────────────────────────────────
URL_SOURCE = r"\b(?:https?|ftp)://[^\s<>\"']+"
DEFAULT_TOKEN_PATTERNS.append(("url", URL_SOURCE))


# ── Date ──────────────────────────────────────────────────────────────────────
# ISO (2024-01-31) or slashed (31/01/2024). The alternation is kept as
# written: the leading \b binds only to the ISO branch and the trailing \b
# only to the slashed one, so "2024-01-315" still yields "2024-01-31" and
# "131/01/2024" yields "31/01/2024". Known fragility of this data.
DATE_SOURCE = r"\b[0-9]{4}-[0-9]{2}-[0-9]{2}|[0-9]{2}/[0-9]{2}/[0-9]{4}\b"
DEFAULT_TOKEN_PATTERNS.append(("date", DATE_SOURCE))


# ── Number ────────────────────────────────────────────────────────────────────
NUMBER_SOURCE = r"\b[0-9]+\b"
DEFAULT_TOKEN_PATTERNS.append(("number", NUMBER_SOURCE))
