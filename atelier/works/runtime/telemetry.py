"""Structured logging for the aggregation pipeline and navigation.

Diagnostics that used to be printed only in development builds go through
an injected Telemetry object instead of a global flag: ``Telemetry.verbose``
emits them at debug level, ``Telemetry.quiet`` drops them. Warnings and
errors are always emitted.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger("atelier.works")


class Telemetry:
    """Logger capability injected into pipeline components."""

    def __init__(self, log: logging.Logger | None = None, *, verbose: bool = False) -> None:
        self._log = log or logger
        self._verbose = verbose

    @classmethod
    def verbose(cls, log: logging.Logger | None = None) -> Telemetry:
        return cls(log, verbose=True)

    @classmethod
    def quiet(cls, log: logging.Logger | None = None) -> Telemetry:
        return cls(log, verbose=False)

    @property
    def is_verbose(self) -> bool:
        return self._verbose

    @property
    def logger(self) -> logging.Logger:
        return self._log

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a diagnostic event (verbose mode only)."""
        if self._verbose:
            self._log.debug(event, extra=fields)

    def info(self, event: str, **fields: Any) -> None:
        if self._verbose:
            self._log.info(event, extra=fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log.warning(event, extra=fields)

    def error(self, event: str, **fields: Any) -> None:
        self._log.error(event, extra=fields)

    # Pipeline events

    def probe_result(self, *, variant: str, accepted: bool) -> None:
        self.debug("schema_probe_result", variant=variant, accepted=accepted)

    def probe_failed(self, *, variant: str, error: BaseException) -> None:
        self.debug(
            "schema_probe_failed",
            variant=variant,
            error_type=type(error).__name__,
            error_message=str(error),
        )

    def page_fetched(
        self,
        *,
        page_index: int,
        rows: int,
        accumulated: int,
        has_next_page: bool,
        latency_ms: float | None = None,
    ) -> None:
        self.debug(
            "page_fetched",
            page_index=page_index,
            rows=rows,
            accumulated=accumulated,
            has_next_page=has_next_page,
            latency_ms=latency_ms,
        )

    def page_error(self, *, page_index: int, accumulated: int, error: BaseException) -> None:
        self.error(
            "page_fetch_error",
            page_index=page_index,
            accumulated=accumulated,
            error_type=type(error).__name__,
            error_message=str(error),
        )

    def aggregation_complete(
        self, *, variant: str, pages: int, total: int, truncated: bool, partial: bool
    ) -> None:
        self.info(
            "aggregation_complete",
            variant=variant,
            pages=pages,
            total=total,
            truncated=truncated,
            partial=partial,
        )
