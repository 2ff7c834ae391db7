"""Capture store backends package."""
from linetok.finder._core.capture.backends.base_store    import BaseCaptureStore
from linetok.finder._core.capture.backends.memory_store  import MemoryCaptureStore

__all__ = ["BaseCaptureStore", "MemoryCaptureStore"]
