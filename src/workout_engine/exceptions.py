"""Custom exception hierarchy for the workout engine.

Every error carries a message ``code`` and the ``params`` used to render it,
so the host can show a localized message via :meth:`WorkoutEngineError.localized`.
"""

from __future__ import annotations

from workout_engine.messages import FALLBACK_LOCALE, render


class WorkoutEngineError(Exception):
    """Base exception for all workout_engine errors."""

    default_code = "engine_error"

    def __init__(self, code: str | None = None, **params) -> None:
        self.code = code or self.default_code
        self.params = params
        super().__init__(render(self.code, params, FALLBACK_LOCALE))

    def localized(self, locale: str | None = None) -> str:
        """Message for the given locale (configured locale when omitted)."""
        return render(self.code, self.params, locale)


class QuestionnaireValidationError(WorkoutEngineError, ValueError):
    """Questionnaire answers were rejected at generation entry."""


class SessionError(WorkoutEngineError):
    """Base class for session runtime failures."""


class SessionStateError(SessionError):
    """Operation not allowed in the session's current state."""


class SessionPreconditionError(SessionError):
    """Finish attempted before any set was completed."""

    default_code = "no_sets_completed"


class SessionEditError(SessionError, ValueError):
    """A structural edit referenced an unknown exercise or carried bad values."""


class HistoryStoreError(WorkoutEngineError):
    """Base class for history storage failures."""

    default_code = "history_write_failed"


class HistoryWriteError(HistoryStoreError):
    """A single write/update/delete attempt against the store failed.

    The in-memory engine state is left as-is; the caller decides whether to
    retry the same call.
    """

    def __init__(self, operation: str, record_id: str | None = None, retryable: bool = True) -> None:
        super().__init__(operation=operation, record_id=record_id)
        self.operation = operation
        self.record_id = record_id
        self.retryable = retryable
        # Set by WorkoutEngine.complete_session so callers can retry the write
        self.record = None


class HistoryReadError(HistoryStoreError):
    """Listing the stored history failed; nothing was changed."""

    default_code = "history_read_failed"

    def __init__(self, operation: str = "list_records", record_id: str | None = None) -> None:
        super().__init__(operation=operation)
        self.operation = operation
        self.record_id = record_id
