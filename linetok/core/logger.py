"""
linetok.core.logger
===================
Structured logger for linetok.
Records finder operations (register, match, capture, …) as JSON-style dicts.
"""

from __future__ import annotations

import json
import sys
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StructuredLogger:
    """
    Lightweight structured logger that records operations as dicts.

    Two output modes:
      console: also prints formatted log lines to stderr
      silent:  stores entries in memory only (default)

    Usage
    -----
    logger = StructuredLogger(name="finder", console=True)
    logger.log("capture", token_type="email", start=8, end=15)
    entries = logger.get_entries(operation="capture")
    """

    def __init__(
        self,
        name: str = "linetok",
        console: bool = False,
        max_entries: int = 10_000,
        min_level: str = "DEBUG",
    ):
        if min_level not in _LEVELS:
            raise ValueError(f"Unknown log level {min_level!r}")
        self.name        = name
        self.console     = console
        self.max_entries = max_entries
        self.min_level   = min_level
        self._entries: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    def log(
        self,
        operation: str,
        level: str = "INFO",
        **kwargs: Any,
    ) -> Optional[Dict[str, Any]]:
        """
        Record a structured log entry.

        Parameters
        ----------
        operation : str
            Short operation name (e.g. "register", "match", "capture").
        level : str
            Log level: DEBUG / INFO / WARNING / ERROR / CRITICAL.
        **kwargs
            Additional key-value pairs to include in the entry.

        Returns
        -------
        dict or None
            The recorded entry, or None if the level is below min_level.
        """
        if _LEVELS.index(level) < _LEVELS.index(self.min_level):
            return None

        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "logger":    self.name,
            "level":     level,
            "operation": operation,
            **kwargs,
        }

        with self._lock:
            # Trim oldest entries if cap exceeded
            if len(self._entries) >= self.max_entries:
                self._entries = self._entries[-(self.max_entries // 2):]
            self._entries.append(entry)

        if self.console:
            self._print_entry(entry)

        return entry

    def debug(self, operation: str, **kwargs: Any) -> Optional[Dict[str, Any]]:
        return self.log(operation, level="DEBUG", **kwargs)

    def warn(self, operation: str, **kwargs: Any) -> Optional[Dict[str, Any]]:
        return self.log(operation, level="WARNING", **kwargs)

    def error(self, operation: str, **kwargs: Any) -> Optional[Dict[str, Any]]:
        return self.log(operation, level="ERROR", **kwargs)

    def get_entries(
        self,
        operation: Optional[str] = None,
        level: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Return stored log entries, optionally filtered.

        Parameters
        ----------
        operation : str or None
            Filter by operation name.
        level : str or None
            Filter by log level.
        """
        with self._lock:
            entries = list(self._entries)
        if operation:
            entries = [e for e in entries if e.get("operation") == operation]
        if level:
            entries = [e for e in entries if e.get("level") == level]
        return entries

    def clear(self) -> None:
        """Remove all stored log entries."""
        with self._lock:
            self._entries.clear()

    def _print_entry(self, entry: Dict[str, Any]) -> None:
        """Pretty-print a log entry to stderr."""
        ts  = entry.get("timestamp", "")[:19]
        lvl = entry.get("level", "INFO").ljust(8)
        op  = entry.get("operation", "")
        extras = {
            k: v for k, v in entry.items()
            if k not in ("timestamp", "logger", "level", "operation")
        }
        extra_str = " " + json.dumps(extras, default=str) if extras else ""
        print(
            f"[{ts}] {lvl} [{self.name}] {op}{extra_str}",
            file=sys.stderr,
            flush=True,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return (
            f"StructuredLogger(name={self.name!r}, "
            f"entries={len(self._entries)}, "
            f"console={self.console})"
        )
