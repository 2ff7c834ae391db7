"""
linetok.finder.config.validator
===============================
Config validation. Raises ConfigError with descriptive messages
when fields have the wrong shape or unsupported values.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from linetok.core.data_types import ANY
from linetok.core.exceptions import ConfigError


_BOOL_FIELDS = ("highlight", "verbose")


class ConfigValidator:
    """
    Validates a finder config dict.
    All fields are optional (defaults are applied in FinderConfig).
    Pattern compilation is NOT checked here: the registry reports that
    as InvalidPatternError when the pattern is registered.
    """

    @staticmethod
    def validate(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate the config dict. Returns the same dict if valid.
        Raises ConfigError if any value is invalid.
        """
        if not isinstance(config, dict):
            raise ConfigError(
                f"Config must be a dict, got {type(config).__name__}",
                details={"type": type(config).__name__},
            )

        if "tokens" in config:
            ConfigValidator.token_pairs(config["tokens"])

        for key in _BOOL_FIELDS:
            if key in config and not isinstance(config[key], bool):
                raise ConfigError(f"{key} must be a bool, got {config[key]!r}")

        if "max_line_length" in config:
            mll = config["max_line_length"]
            if isinstance(mll, bool) or not isinstance(mll, int) or mll < 0:
                raise ConfigError(
                    f"max_line_length must be a non-negative int, got {mll!r}"
                )

        if "capture" in config:
            capture = config["capture"]
            if not isinstance(capture, dict):
                raise ConfigError("capture must be a dict")
            if "max_entries" in capture:
                me = capture["max_entries"]
                if isinstance(me, bool) or not isinstance(me, int) or me < 1:
                    raise ConfigError(
                        f"capture.max_entries must be a positive int, got {me!r}"
                    )

        if "logging" in config:
            logging_cfg = config["logging"]
            if not isinstance(logging_cfg, dict):
                raise ConfigError("logging must be a dict")
            if "console" in logging_cfg and not isinstance(logging_cfg["console"], bool):
                raise ConfigError("logging.console must be a bool")

        return config

    @staticmethod
    def token_pairs(tokens: Any) -> List[Tuple[str, str, bool]]:
        """
        Normalise the `tokens` section to ordered (name, pattern, ignore_case).

        Accepts either a list of {name, pattern[, ignore_case]} dicts or a
        mapping of name → pattern (mappings keep file order).
        """
        if isinstance(tokens, dict):
            items = [
                {"name": name, "pattern": pattern}
                for name, pattern in tokens.items()
            ]
        elif isinstance(tokens, list):
            items = tokens
        else:
            raise ConfigError(
                "tokens must be a list or a mapping",
                details={"got": type(tokens).__name__},
            )

        pairs: List[Tuple[str, str, bool]] = []
        seen = set()
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise ConfigError(
                    f"tokens[{index}] must be a dict with name and pattern",
                    details={"got": repr(item)},
                )
            name    = item.get("name")
            pattern = item.get("pattern")
            if not isinstance(name, str) or not name:
                raise ConfigError(f"tokens[{index}].name must be a non-empty string")
            if not isinstance(pattern, str):
                raise ConfigError(
                    f"tokens[{index}].pattern must be a string",
                    details={"name": name},
                )
            if name == ANY:
                raise ConfigError(
                    f"{ANY!r} is reserved for any-type selection and cannot name a token",
                    details={"index": index},
                )
            if name in seen:
                raise ConfigError(
                    f"Duplicate token name in config: {name!r}",
                    details={"index": index},
                )
            ignore_case = item.get("ignore_case", False)
            if not isinstance(ignore_case, bool):
                raise ConfigError(f"tokens[{index}].ignore_case must be a bool")
            seen.add(name)
            pairs.append((name, pattern, ignore_case))
        return pairs
