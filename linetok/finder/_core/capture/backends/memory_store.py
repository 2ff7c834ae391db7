"""
linetok.finder._core.capture.backends.memory_store
==================================================
In-memory kill-ring.
Newest capture first; once max_entries is reached the oldest is dropped.
Data is lost on process exit.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from linetok.finder._core.capture.backends.base_store import BaseCaptureStore


class MemoryCaptureStore(BaseCaptureStore):
    """
    Bounded, thread-safe in-memory capture store.

    Parameters
    ----------
    max_entries : int
        Ring length. Must be at least 1.
    """

    def __init__(self, max_entries: int = 60):
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self.max_entries = max_entries
        self._ring: Deque[Dict[str, Any]] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def push(self, text: str, **meta: Any) -> None:
        entry = {"text": text, **meta}
        with self._lock:
            self._ring.appendleft(entry)

    def latest(self) -> Optional[str]:
        with self._lock:
            return self._ring[0]["text"] if self._ring else None

    def entries(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(e) for e in self._ring]

    def clear(self) -> None:
        with self._lock:
            self._ring.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._ring)

    def __repr__(self) -> str:
        return f"MemoryCaptureStore(entries={len(self)}, max_entries={self.max_entries})"
