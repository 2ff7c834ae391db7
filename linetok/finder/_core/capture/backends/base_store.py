"""Abstract capture store interface."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class BaseCaptureStore(ABC):
    """
    Abstract interface for the buffer-like store captured tokens go into.

    A store is the kill-ring / clipboard side of a capture. The finder only
    pushes into it; reading it back is up to the host application.
    """

    @abstractmethod
    def push(self, text: str, **meta: Any) -> None:
        """
        Add captured text as the newest entry.

        Parameters
        ----------
        text : str
            The matched substring.
        **meta
            Extra fields kept alongside the text (token_type, start, end).
        """
        ...

    @abstractmethod
    def latest(self) -> Optional[str]:
        """Return the most recently pushed text, or None if the store is empty."""
        ...

    @abstractmethod
    def entries(self) -> List[Dict[str, Any]]:
        """Return all entries, newest first. Each dict has at least "text"."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry."""
        ...

    def __len__(self) -> int:
        return len(self.entries())

    def close(self) -> None:
        """Optional: release any resources (clipboard handles, files)."""
        pass
