"""User-facing message catalogs for validation and precondition failures.

Messages are ``str.format`` templates keyed by error code. The host picks a
locale; unknown locales fall back to English, unknown codes to the code
itself.
"""

from __future__ import annotations

from workout_engine import config

FALLBACK_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "days_per_week_out_of_range": (
            "Choose between {min_days} and {max_days} training days per week (got {value})."
        ),
        "duration_not_positive": "Session duration must be a positive number of minutes (got {value}).",
        "too_many_priority_muscles": "Select at most {max_count} priority muscle groups.",
        "duplicate_priority_muscle": "Priority muscle group '{value}' was selected more than once.",
        "unknown_muscle_group": "'{value}' is not a known muscle group.",
        "unknown_injury": "'{value}' is not a known muscle group or injury area.",
        "injury_sentinel_conflict": "'None' cannot be combined with other injuries.",
        "unknown_choice": "'{value}' is not a valid choice for {field}.",
        "missing_field": "The questionnaire is missing '{field}'.",
        "session_not_active": "There is no active workout. Open a training day first.",
        "session_already_active": "A workout is already in progress.",
        "edit_mode_required": "Turn on edit mode to change the exercise list.",
        "edit_mode_active": "Leave edit mode before ticking off sets.",
        "unknown_exercise": "Exercise '{uid}' is not part of this workout.",
        "set_out_of_range": "Set {set_index} does not exist for '{name}'.",
        "invalid_sets": "Sets must be a whole number greater than zero (got '{value}').",
        "invalid_rest": "Rest must be a whole number of seconds (got '{value}').",
        "no_sets_completed": "Complete at least one set before finishing the workout.",
        "history_write_failed": "Could not save your workout history. Please try again.",
        "history_read_failed": "Could not load your workout history. Please try again.",
    },
    "pt-BR": {
        "days_per_week_out_of_range": (
            "Escolha entre {min_days} e {max_days} dias de treino por semana (recebido {value})."
        ),
        "duration_not_positive": "A duração do treino deve ser um número positivo de minutos (recebido {value}).",
        "too_many_priority_muscles": "Selecione no máximo {max_count} grupos musculares prioritários.",
        "duplicate_priority_muscle": "O grupo muscular '{value}' foi selecionado mais de uma vez.",
        "unknown_muscle_group": "'{value}' não é um grupo muscular conhecido.",
        "unknown_injury": "'{value}' não é um grupo muscular ou área de lesão conhecida.",
        "injury_sentinel_conflict": "'Nenhuma' não pode ser combinada com outras lesões.",
        "unknown_choice": "'{value}' não é uma opção válida para {field}.",
        "missing_field": "O questionário não informou '{field}'.",
        "session_not_active": "Nenhum treino em andamento. Abra um dia de treino primeiro.",
        "session_already_active": "Já existe um treino em andamento.",
        "edit_mode_required": "Ative o modo de edição para alterar a lista de exercícios.",
        "edit_mode_active": "Saia do modo de edição para marcar as séries.",
        "unknown_exercise": "O exercício '{uid}' não faz parte deste treino.",
        "set_out_of_range": "A série {set_index} não existe para '{name}'.",
        "invalid_sets": "As séries devem ser um número inteiro maior que zero (recebido '{value}').",
        "invalid_rest": "O descanso deve ser um número inteiro de segundos (recebido '{value}').",
        "no_sets_completed": "Conclua pelo menos uma série antes de finalizar o treino.",
        "history_write_failed": "Não foi possível salvar seu histórico de treinos. Tente novamente.",
        "history_read_failed": "Não foi possível carregar seu histórico de treinos. Tente novamente.",
    },
}


def render(code: str, params: dict | None = None, locale: str | None = None) -> str:
    """Render the message for *code* in *locale* (default: configured locale)."""
    catalog = MESSAGES.get(locale or config.LOCALE) or MESSAGES[FALLBACK_LOCALE]
    template = catalog.get(code) or MESSAGES[FALLBACK_LOCALE].get(code)
    if template is None:
        return code
    try:
        return template.format(**(params or {}))
    except (KeyError, IndexError):
        return template
