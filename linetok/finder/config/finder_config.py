"""
linetok.finder.config.finder_config
===================================
FinderConfig: a typed, validated configuration object for TokenFinder.
Can be initialized from:
  - A preset name string ("developer", "contact")
  - A YAML file path
  - A raw dict (optionally nested under a "linetok" key)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

import regex

from linetok.core.config_loader import load_config
from linetok.finder.config.validator import ConfigValidator
from linetok.finder._core.registry.default_patterns import DEFAULT_TOKEN_PATTERNS


class FinderConfig:
    """
    Typed configuration for TokenFinder.

    Usage
    -----
    # From preset
    cfg = FinderConfig("developer")

    # From dict
    cfg = FinderConfig({
        "tokens": [
            {"name": "number", "pattern": r"\\b[0-9]+\\b"},
            {"name": "email",  "pattern": r"\\b[\\w.%+-]+@[\\w.-]+\\.[A-Za-z]{2,}\\b"},
        ],
        "highlight": False,
        "verbose":   True,
    })

    # From YAML file
    cfg = FinderConfig("~/.config/linetok.yaml")
    """

    def __init__(self, source: Union[str, Dict[str, Any], None] = None):
        raw = load_config(source) if source is not None else {}
        if isinstance(raw, dict) and "linetok" in raw:
            raw = raw["linetok"]
        raw = ConfigValidator.validate(raw)
        self._raw = raw

        # ── Token set ──────────────────────────────────────────────────────
        if "tokens" in raw:
            self.tokens: List[Tuple[str, str, bool]] = ConfigValidator.token_pairs(raw["tokens"])
        else:
            self.tokens = [(name, source, False) for name, source in DEFAULT_TOKEN_PATTERNS]

        # ── Side-effect flags (consumed by the finder, never by the engine) ─
        self.highlight: bool = raw.get("highlight", True)
        self.verbose: bool   = raw.get("verbose", True)

        # 0 means unlimited
        self.max_line_length: int = int(raw.get("max_line_length", 0))

        capture_cfg = raw.get("capture", {})
        self.capture_max_entries: int = int(capture_cfg.get("max_entries", 60))

        logging_cfg = raw.get("logging", {})
        self.log_console: bool = logging_cfg.get("console", False)

    @property
    def token_types(self) -> List[str]:
        """Configured token type names, in trial order."""
        return [name for name, _, _ in self.tokens]

    def token_entries(self) -> List[Tuple[str, str, int]]:
        """Return ordered (name, pattern, regex flags) triples for the registry."""
        return [
            (name, source, regex.IGNORECASE if ignore_case else 0)
            for name, source, ignore_case in self.tokens
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Return the effective config as a plain dict."""
        return {
            "tokens": [
                {"name": name, "pattern": source, "ignore_case": ignore_case}
                for name, source, ignore_case in self.tokens
            ],
            "highlight":       self.highlight,
            "verbose":         self.verbose,
            "max_line_length": self.max_line_length,
            "capture":         {"max_entries": self.capture_max_entries},
            "logging":         {"console": self.log_console},
        }

    def __repr__(self) -> str:
        return (
            f"FinderConfig(tokens={self.token_types}, "
            f"highlight={self.highlight}, verbose={self.verbose})"
        )
