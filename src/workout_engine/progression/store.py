"""History store contract and the in-memory reference implementation.

The engine never persists anything itself. The host plugs its storage
(database table, remote API, ...) in behind :class:`HistoryStore`; any
exception a store raises is treated as a failed, retryable attempt.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod

from workout_engine.models.enums import Rating
from workout_engine.models.session import CompletedSession


class HistoryStore(ABC):
    """Storage backend for completed-session records."""

    @abstractmethod
    def list_records(self) -> list[CompletedSession]:
        """All records in insertion order (oldest first)."""
        ...

    @abstractmethod
    def append(self, record: CompletedSession) -> None:
        """Persist a new record. Re-appending an existing id must be a no-op."""
        ...

    @abstractmethod
    def update_rating(self, record_id: str, rating: Rating) -> bool:
        """Replace one record's rating. Returns False when the id is unknown."""
        ...

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Remove one record. Returns False when the id is unknown."""
        ...


class InMemoryHistoryStore(HistoryStore):
    """List-backed store used by tests and hosts without a backend yet."""

    def __init__(self, records: list[CompletedSession] | None = None) -> None:
        self._records: list[CompletedSession] = list(records or [])

    def list_records(self) -> list[CompletedSession]:
        return list(self._records)

    def append(self, record: CompletedSession) -> None:
        if any(r.id == record.id for r in self._records):
            return
        self._records.append(record)

    def update_rating(self, record_id: str, rating: Rating) -> bool:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                self._records[i] = dataclasses.replace(record, rating=rating)
                return True
        return False

    def delete(self, record_id: str) -> bool:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[i]
                return True
        return False
