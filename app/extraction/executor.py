"""Runs an extraction cascade, first success wins.

A strategy fails when it raises, exceeds its time budget, or returns blank
text. When every strategy fails the outcome of the last attempt is chosen so
the caller sees the most downstream failure.
"""

import re
import threading
from collections.abc import Callable
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import TypeVar

from app.extraction.base import BaseDocumentUnderstanding, BaseOfficeDocumentReader
from app.extraction.exceptions import (
    DocumentUnderstandingError,
    ExtractionError,
    ExtractionTimeoutError,
)
from app.extraction.local_extractors import decode_plain_text, extract_html_text
from app.logging.logger import Log
from app.processor.models import (
    DocumentKind,
    ErrorKind,
    ExtractionAttempt,
    ExtractionOutcome,
    ExtractionTrace,
    StrategyId,
)

T = TypeVar("T")

_WHITESPACE_RE = re.compile(r"\s+")


class _ServiceNotConfiguredError(ExtractionError):
    pass


class _EmptyTextError(ExtractionError):
    pass


_Handler = Callable[[bytes, DocumentKind, ExtractionOutcome | None], str]


class ExtractionExecutor:
    """Tries each ExtractionAttempt in order against the configured collaborators."""

    def __init__(
        self,
        *,
        document_understanding: BaseDocumentUnderstanding | None,
        office_reader: BaseOfficeDocumentReader,
        document_understanding_timeout_seconds: float = 60.0,
        office_reader_timeout_seconds: float = 60.0,
    ) -> None:
        self._document_understanding = document_understanding
        self._office_reader = office_reader
        self._du_timeout = document_understanding_timeout_seconds
        self._office_timeout = office_reader_timeout_seconds
        self._handlers: dict[StrategyId, _Handler] = {
            StrategyId.DOCUMENT_UNDERSTANDING_SERVICE: self._run_document_understanding,
            StrategyId.PLACEHOLDER_DESCRIPTION: self._run_placeholder,
            StrategyId.OFFICE_TEXT_EXTRACTOR: self._run_office_reader,
            StrategyId.HTML_TEXT_EXTRACTOR: self._run_html,
            StrategyId.RAW_PASSTHROUGH: self._run_passthrough,
        }

    def execute(
        self,
        data: bytes,
        kind: DocumentKind,
        attempts: list[ExtractionAttempt],
    ) -> ExtractionTrace:
        """Run *attempts* in order and return the chosen outcome.

        Raises:
            ValueError: if *attempts* is empty.
        """
        if not attempts:
            raise ValueError("Extraction cascade must contain at least one attempt")

        outcomes: list[ExtractionOutcome] = []
        previous: ExtractionOutcome | None = None
        for attempt in attempts:
            outcome = self._run_attempt(attempt, data, kind, previous)
            outcomes.append(outcome)
            if outcome.succeeded:
                Log.info(
                    f"Extracted {len(outcome.text or '')} chars from {kind.value} document "
                    f"using {attempt.strategy_id.value}"
                )
                return ExtractionTrace(chosen=outcome, outcomes=outcomes)
            Log.warning(
                f"Extraction strategy {attempt.strategy_id.value} failed "
                f"({outcome.failure_reason.value if outcome.failure_reason else 'unknown'}): "
                f"{outcome.failure_message}"
            )
            previous = outcome

        Log.error(f"All {len(attempts)} extraction strategies failed for {kind.value} document")
        return ExtractionTrace(chosen=outcomes[-1], outcomes=outcomes)

    def _run_attempt(
        self,
        attempt: ExtractionAttempt,
        data: bytes,
        kind: DocumentKind,
        previous: ExtractionOutcome | None,
    ) -> ExtractionOutcome:
        handler = self._handlers[attempt.strategy_id]
        try:
            text = handler(data, kind, previous)
            if not text or not text.strip():
                raise _EmptyTextError(f"{attempt.strategy_id.value} returned no text")
        except Exception as exc:
            return ExtractionOutcome(
                attempt=attempt,
                succeeded=False,
                failure_reason=self._failure_reason(exc),
                failure_message=str(exc) or type(exc).__name__,
            )
        return ExtractionOutcome(attempt=attempt, succeeded=True, text=text)

    @staticmethod
    def _failure_reason(exc: Exception) -> ErrorKind:
        if isinstance(exc, _EmptyTextError):
            return ErrorKind.EMPTY_CONTENT
        if isinstance(
            exc,
            (ExtractionTimeoutError, DocumentUnderstandingError, _ServiceNotConfiguredError),
        ):
            return ErrorKind.UNREACHABLE
        return ErrorKind.EXTRACTION_FAILED

    # ------------------------------------------------------------------
    # Strategy handlers
    # ------------------------------------------------------------------

    def _run_document_understanding(
        self,
        data: bytes,
        kind: DocumentKind,
        previous: ExtractionOutcome | None,
    ) -> str:
        service = self._document_understanding
        if service is None:
            raise _ServiceNotConfiguredError("Document understanding service is not configured")
        return self._call_with_timeout(
            lambda: service.extract(data, kind),
            self._du_timeout,
            "Document understanding service",
        )

    def _run_office_reader(
        self,
        data: bytes,
        kind: DocumentKind,
        previous: ExtractionOutcome | None,
    ) -> str:
        return self._call_with_timeout(
            lambda: self._office_reader.extract_raw_text(data),
            self._office_timeout,
            "Office document reader",
        )

    @staticmethod
    def _run_html(data: bytes, kind: DocumentKind, previous: ExtractionOutcome | None) -> str:
        return extract_html_text(data)

    @staticmethod
    def _run_passthrough(
        data: bytes,
        kind: DocumentKind,
        previous: ExtractionOutcome | None,
    ) -> str:
        return decode_plain_text(data)

    @staticmethod
    def _run_placeholder(
        data: bytes,
        kind: DocumentKind,
        previous: ExtractionOutcome | None,
    ) -> str:
        return placeholder_text(kind, len(data), _unavailable_reason(previous))

    @staticmethod
    def _call_with_timeout(call: Callable[[], T], timeout: float, label: str) -> T:
        # Daemon thread: an abandoned call must not keep the interpreter alive.
        future: Future[T] = Future()

        def _target() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(call())
            except Exception as exc:
                future.set_exception(exc)

        threading.Thread(target=_target, name=f"{label} call", daemon=True).start()
        try:
            return future.result(timeout=timeout)
        except FuturesTimeoutError as exc:
            raise ExtractionTimeoutError(f"{label} timed out after {timeout}s") from exc


def placeholder_text(kind: DocumentKind, size: int, reason: str) -> str:
    """Deterministic description used when no real extractor produced text."""
    reason = reason.strip().rstrip(".")
    return (
        f"This is placeholder text for a {kind.value} document of approximately "
        f"{size} bytes. {reason}."
    )


def _unavailable_reason(previous: ExtractionOutcome | None) -> str:
    if previous is None or not previous.failure_message:
        return "The document understanding service was unavailable"
    message = _WHITESPACE_RE.sub(" ", previous.failure_message).strip()
    if previous.failure_reason == ErrorKind.EMPTY_CONTENT:
        return "The document understanding service returned no usable text"
    return f"The document understanding service was unavailable: {message}"
