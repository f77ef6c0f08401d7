"""Tests for error codes and localized message rendering."""

from __future__ import annotations

from workout_engine.exceptions import (
    HistoryReadError,
    HistoryStoreError,
    HistoryWriteError,
    QuestionnaireValidationError,
    SessionPreconditionError,
    WorkoutEngineError,
)
from workout_engine.messages import MESSAGES, render


class TestRender:
    def test_every_locale_covers_every_code(self) -> None:
        assert set(MESSAGES["pt-BR"]) == set(MESSAGES["en"])

    def test_renders_params(self) -> None:
        text = render("unknown_muscle_group", {"value": "Neck"}, "en")
        assert text == "'Neck' is not a known muscle group."

    def test_unknown_locale_falls_back_to_english(self) -> None:
        assert render("no_sets_completed", None, "de") == MESSAGES["en"]["no_sets_completed"]

    def test_unknown_code_returns_code(self) -> None:
        assert render("does_not_exist", None, "en") == "does_not_exist"

    def test_missing_param_returns_template(self) -> None:
        assert render("unknown_exercise", {}, "en") == MESSAGES["en"]["unknown_exercise"]


class TestErrors:
    def test_message_is_english(self) -> None:
        err = QuestionnaireValidationError("missing_field", field="venue")
        assert str(err) == "The questionnaire is missing 'venue'."

    def test_localized(self) -> None:
        err = SessionPreconditionError()
        assert err.code == "no_sets_completed"
        assert err.localized("pt-BR").startswith("Conclua")

    def test_history_write_error(self) -> None:
        err = HistoryWriteError("record", record_id="abc")
        assert isinstance(err, HistoryStoreError)
        assert isinstance(err, WorkoutEngineError)
        assert err.retryable is True
        assert err.code == "history_write_failed"
        assert err.operation == "record"
        assert err.record_id == "abc"

    def test_history_read_error(self) -> None:
        err = HistoryReadError()
        assert isinstance(err, HistoryStoreError)
        assert err.code == "history_read_failed"
        assert err.operation == "list_records"
        assert err.localized("pt-BR").startswith("Não foi possível carregar")
