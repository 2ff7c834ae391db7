"""
linetok.finder.token_finder
===========================
TokenFinder: the main class.
Wires the token registry, selection strategy, and capture store together.

Public API:
  find(line, token_type, n)                  → (type, MatchSpan) | None
  find_in_buffer(buffer, point, type, n)     → (type, MatchSpan) | None
  capture(line, token_type, n)               → CaptureResult | None
  register(token_type, pattern_source)       → Pattern
  list_types()                               → list[str]
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from linetok.core.data_types import ANY, CaptureResult, Line, MatchSpan, Pattern
from linetok.core.exceptions import ConfigError, InvalidPatternError, LineTooLongError
from linetok.core.logger import StructuredLogger
from linetok.finder.config.finder_config import FinderConfig
from linetok.finder._core.capture.backends.base_store import BaseCaptureStore
from linetok.finder._core.capture.backends.memory_store import MemoryCaptureStore
from linetok.finder._core.registry.token_registry import TokenRegistry
from linetok.finder._core.selection.strategy import select


class TokenFinder:
    """
    Line-scoped token finder.

    Finds the Nth token of a given type (or of any type) on one line and,
    through capture(), copies it into a kill-ring-like store. Highlighting
    and confirmation messages are handed to caller-supplied callbacks; the
    matching engine itself performs no side effects.

    Usage
    -----
    finder = TokenFinder()                      # built-in token set
    finder = TokenFinder(config="developer")    # bundled preset
    finder = TokenFinder(config={"tokens": {"number": r"\\b[0-9]+\\b"}})

    finder.find("call 555 or 42 today", "number", 2)
    # → ("number", MatchSpan(start=12, end=14, text="42", token_type="number"))

    result = finder.capture("contact a@b.com now")
    finder.store.latest()    # → "a@b.com"
    """

    def __init__(
        self,
        config: Union[str, Dict[str, Any], FinderConfig, None] = None,
        store: Optional[BaseCaptureStore] = None,
        on_highlight: Optional[Callable[[CaptureResult], None]] = None,
        on_message: Optional[Callable[[str], None]] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Parameters
        ----------
        config : str, dict, FinderConfig, or None
            str  → preset name ("developer", "contact") or YAML file path
            dict → raw config dict
            FinderConfig → already-built config object
            None → built-in token set, highlight and verbose on
        store : BaseCaptureStore or None
            Where captured tokens go. Defaults to a MemoryCaptureStore sized
            by capture.max_entries.
        on_highlight : callable or None
            Called with the CaptureResult after a capture when highlight is on.
        on_message : callable or None
            Called with the confirmation message when verbose is on.
            Defaults to recording the message in the logger.
        logger : StructuredLogger or None
            Defaults to a StructuredLogger named "linetok.finder".
        """
        if isinstance(config, FinderConfig):
            self._cfg = config
        else:
            self._cfg = FinderConfig(config)

        self._logger = logger if logger is not None else StructuredLogger(
            name="linetok.finder", console=self._cfg.log_console,
        )
        self._store = store if store is not None else MemoryCaptureStore(
            max_entries=self._cfg.capture_max_entries,
        )
        self._on_highlight = on_highlight
        self._on_message   = on_message

        # Built on first use
        self._registry: Optional[TokenRegistry] = None
        self._initialized = False
        self._init_lock = threading.Lock()

    def initialize(self) -> "TokenFinder":
        """Build the registry from the configured token list. Returns self."""
        with self._init_lock:
            if not self._initialized:
                self._build_registry()
        return self

    def _build_registry(self) -> None:
        registry = TokenRegistry()
        for name, source, flags in self._cfg.token_entries():
            try:
                registry.register(name, source, flags)
            except InvalidPatternError as exc:
                self._logger.error("register_failed", token_type=name, error=str(exc))
                raise
        self._registry = registry
        self._initialized = True
        self._logger.debug("initialize", token_types=registry.list_types())

    # ── Properties ────────────────────────────────────────────────────────────

    @property
    def config(self) -> FinderConfig:
        return self._cfg

    @property
    def registry(self) -> TokenRegistry:
        if not self._initialized:
            self.initialize()
        return self._registry

    @property
    def store(self) -> BaseCaptureStore:
        return self._store

    @property
    def logger(self) -> StructuredLogger:
        return self._logger

    # ── Registry management ───────────────────────────────────────────────────

    def register(self, token_type: str, pattern_source: str, flags: int = 0) -> Pattern:
        """
        Add or replace a token type at runtime.

        Raises
        ------
        ConfigError
            If token_type is the reserved name "any".
        InvalidPatternError
            If the pattern does not compile (registry left unchanged).
        """
        if token_type == ANY:
            raise ConfigError(
                f"{ANY!r} is reserved for any-type selection and cannot name a token"
            )
        registry = self.registry
        replacing = token_type in registry
        try:
            pattern = registry.register(token_type, pattern_source, flags)
        except InvalidPatternError as exc:
            self._logger.error("register_failed", token_type=token_type, error=str(exc))
            raise
        self._logger.log(
            "register", token_type=token_type, pattern=pattern.source, replaced=replacing,
        )
        return pattern

    def list_types(self) -> List[str]:
        """Registered token types in any-type trial order."""
        return self.registry.list_types()

    # ── Matching ──────────────────────────────────────────────────────────────

    def find(
        self,
        line: Union[str, Line],
        token_type: str = ANY,
        n: int = 1,
    ) -> Optional[Tuple[str, MatchSpan]]:
        """
        Find the Nth token of token_type (or of any type) on line.

        Parameters
        ----------
        line : str or Line
            The current line's text.
        token_type : str
            A registered token type, or ANY ("any").
        n : int
            1-based occurrence index.

        Returns
        -------
        (token_type, MatchSpan) or None
            Spans are line-relative. None when there is no Nth match.

        Raises
        ------
        InvalidOccurrenceError, UnknownTokenTypeError, LineTooLongError
        """
        line = self._as_line(line)
        result = select(line, self.registry, token_type, n)
        if result is None:
            self._logger.debug("no_match", token_type=token_type, n=n)
        else:
            winner, span = result
            self._logger.debug(
                "match", token_type=winner, requested=token_type, n=n,
                start=span.start, end=span.end,
            )
        return result

    def find_in_buffer(
        self,
        buffer: str,
        point: int,
        token_type: str = ANY,
        n: int = 1,
    ) -> Optional[Tuple[str, MatchSpan]]:
        """
        Like find(), on the line of buffer that contains point.
        The returned span is in buffer coordinates.
        """
        line = Line.at(buffer, point)
        result = self.find(line, token_type, n)
        if result is None:
            return None
        winner, span = result
        return winner, line.to_buffer(span)

    def capture(
        self,
        line: Union[str, Line],
        token_type: str = ANY,
        n: int = 1,
    ) -> Optional[CaptureResult]:
        """
        Find a token and copy it into the capture store.

        After a successful match the matched text is pushed to the store,
        on_highlight is called if highlight is enabled, and a confirmation
        message is emitted if verbose is enabled.

        Returns
        -------
        CaptureResult or None
            None when there is no Nth match; nothing is captured then.
        """
        line = self._as_line(line)
        result = self.find(line, token_type, n)
        if result is None:
            return None

        winner, span = result
        buffer_span = line.to_buffer(span)
        message = _format_message(winner, span.text) if self._cfg.verbose else None
        captured = CaptureResult(
            token_type  = winner,
            span        = span,
            buffer_span = buffer_span,
            message     = message,
        )

        self._store.push(
            span.text, token_type=winner, start=buffer_span.start, end=buffer_span.end,
        )
        self._logger.log(
            "capture", token_type=winner, start=buffer_span.start, end=buffer_span.end,
        )

        if self._cfg.highlight and self._on_highlight is not None:
            self._on_highlight(captured)

        if message is not None:
            if self._on_message is not None:
                self._on_message(message)
            else:
                self._logger.log("message", text=message)

        return captured

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _as_line(self, line: Union[str, Line]) -> Line:
        if not isinstance(line, Line):
            line = Line(line)
        limit = self._cfg.max_line_length
        if limit and len(line) > limit:
            self._logger.warn("line_too_long", length=len(line), limit=limit)
            raise LineTooLongError(
                f"Line is {len(line)} characters, limit is {limit}",
                details={"length": len(line), "limit": limit},
            )
        return line

    def __repr__(self) -> str:
        return f"TokenFinder(config={self._cfg!r}, store={self._store!r})"


def _format_message(token_type: str, text: str) -> str:
    """Human-readable confirmation for a capture."""
    return f'Copied {token_type} "{text}"'
