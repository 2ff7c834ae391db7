"""Config package init."""
from linetok.finder.config.finder_config import FinderConfig
from linetok.finder.config.validator import ConfigValidator
__all__ = ["FinderConfig", "ConfigValidator"]
