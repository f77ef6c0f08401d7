"""Questionnaire answers — the validated input to plan generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping

from workout_engine.exceptions import QuestionnaireValidationError
from workout_engine.models.enums import (
    INJURY_AREAS,
    MAX_DAYS_PER_WEEK,
    MAX_PRIORITY_MUSCLES,
    MIN_DAYS_PER_WEEK,
    MUSCLE_ALIASES,
    MUSCLE_GROUPS,
    NO_INJURIES,
    NO_INJURIES_ALIASES,
    BodyType,
    ExperienceLevel,
    Goal,
    ProgressionIntensity,
    SplitPreference,
    Venue,
)


@dataclass(frozen=True)
class QuestionnaireAnswers:
    """Frozen, validated questionnaire answers.

    Construction validates every field, so an instance that exists is always
    safe to hand to the plan generator. Use :meth:`from_dict` for loose,
    host-supplied values.
    """

    venue: Venue
    days_per_week: int
    session_duration_min: int
    primary_goal: Goal
    experience_level: ExperienceLevel
    body_type: BodyType
    progression_intensity: ProgressionIntensity = ProgressionIntensity.MODERATE
    priority_muscles: tuple[str, ...] = field(default_factory=tuple)
    has_home_equipment: bool = False
    injuries: frozenset[str] = field(default_factory=lambda: frozenset({NO_INJURIES}))
    split_preference: SplitPreference = SplitPreference.NO_PREFERENCE

    def __post_init__(self) -> None:
        if not MIN_DAYS_PER_WEEK <= self.days_per_week <= MAX_DAYS_PER_WEEK:
            raise QuestionnaireValidationError(
                "days_per_week_out_of_range",
                value=self.days_per_week,
                min_days=MIN_DAYS_PER_WEEK,
                max_days=MAX_DAYS_PER_WEEK,
            )
        if self.session_duration_min <= 0:
            raise QuestionnaireValidationError(
                "duration_not_positive", value=self.session_duration_min,
            )

        if len(self.priority_muscles) > MAX_PRIORITY_MUSCLES:
            raise QuestionnaireValidationError(
                "too_many_priority_muscles", max_count=MAX_PRIORITY_MUSCLES,
            )
        seen: set[str] = set()
        for muscle in self.priority_muscles:
            if muscle in seen:
                raise QuestionnaireValidationError("duplicate_priority_muscle", value=muscle)
            if muscle not in MUSCLE_GROUPS and muscle not in MUSCLE_ALIASES:
                raise QuestionnaireValidationError("unknown_muscle_group", value=muscle)
            seen.add(muscle)

        if NO_INJURIES in self.injuries and len(self.injuries) > 1:
            raise QuestionnaireValidationError("injury_sentinel_conflict")
        for injury in self.injuries:
            if injury != NO_INJURIES and injury not in MUSCLE_GROUPS and injury not in INJURY_AREAS:
                raise QuestionnaireValidationError("unknown_injury", value=injury)

    @property
    def priority_muscle_groups(self) -> frozenset[str]:
        """Priority selections with aliases ("Arms") expanded."""
        groups: set[str] = set()
        for muscle in self.priority_muscles:
            groups.update(MUSCLE_ALIASES.get(muscle, (muscle,)))
        return frozenset(groups)

    @property
    def excluded_muscle_groups(self) -> frozenset[str]:
        """Muscle groups to avoid, with joint areas expanded."""
        excluded: set[str] = set()
        for injury in self.injuries:
            if injury == NO_INJURIES:
                continue
            excluded.update(INJURY_AREAS.get(injury, frozenset({injury})))
        return frozenset(excluded)

    # -- Factory ----------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> QuestionnaireAnswers:
        """Build validated answers from loosely-typed host values.

        Enum fields accept the enum member, its name in any case
        (``"fat_loss"``, ``"FAT_LOSS"``) or the camel-case spelling used by the
        wizard (``"FatLoss"``). Unknown strings are rejected.
        """
        def required(key: str) -> Any:
            if key not in data:
                raise QuestionnaireValidationError("missing_field", field=key)
            return data[key]

        injuries = data.get("injuries") or (NO_INJURIES,)
        if isinstance(injuries, str):
            injuries = (injuries,)
        injuries = [NO_INJURIES if i in NO_INJURIES_ALIASES else i for i in injuries]
        priority = data.get("priority_muscles") or ()
        if isinstance(priority, str):
            priority = (priority,)
        return cls(
            venue=_parse_enum(Venue, required("venue"), "venue"),
            days_per_week=_parse_int(required("days_per_week"), "days_per_week"),
            session_duration_min=_parse_int(
                required("session_duration_min"), "session_duration_min",
            ),
            primary_goal=_parse_enum(Goal, required("primary_goal"), "primary_goal"),
            experience_level=_parse_enum(
                ExperienceLevel, required("experience_level"), "experience_level",
            ),
            body_type=_parse_enum(BodyType, required("body_type"), "body_type"),
            progression_intensity=_parse_enum(
                ProgressionIntensity,
                data.get("progression_intensity", ProgressionIntensity.MODERATE),
                "progression_intensity",
            ),
            priority_muscles=tuple(priority),
            has_home_equipment=bool(data.get("has_home_equipment", False)),
            injuries=frozenset(injuries),
            split_preference=_parse_enum(
                SplitPreference,
                data.get("split_preference", SplitPreference.NO_PREFERENCE),
                "split_preference",
            ),
        )


def _parse_enum(enum_cls: type[IntEnum], value: Any, field_name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().replace("-", "_").replace(" ", "_")
        for member in enum_cls:
            if member.name == key.upper() or member.name.replace("_", "") == key.upper():
                return member
    raise QuestionnaireValidationError("unknown_choice", value=value, field=field_name)


def _parse_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise QuestionnaireValidationError("unknown_choice", value=value, field=field_name)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise QuestionnaireValidationError(
            "unknown_choice", value=value, field=field_name,
        ) from None
