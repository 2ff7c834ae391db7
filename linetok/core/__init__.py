"""linetok.core — Foundation layer shared by every linetok module."""

from linetok.core.data_types import (
    ANY,
    Pattern,
    MatchSpan,
    Line,
    CaptureResult,
)
from linetok.core.exceptions import (
    LinetokBaseError,
    InvalidPatternError,
    UnknownTokenTypeError,
    InvalidOccurrenceError,
    ConfigError,
    LineTooLongError,
)
from linetok.core.config_loader import load_config, list_presets
from linetok.core.logger import StructuredLogger

__all__ = [
    "ANY",
    "Pattern",
    "MatchSpan",
    "Line",
    "CaptureResult",
    "LinetokBaseError",
    "InvalidPatternError",
    "UnknownTokenTypeError",
    "InvalidOccurrenceError",
    "ConfigError",
    "LineTooLongError",
    "load_config",
    "list_presets",
    "StructuredLogger",
]
