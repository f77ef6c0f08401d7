"""Split templates — the weekly schedule shapes a plan can take.

Each template is a fixed list of days, each naming its focus label and the
muscle groups it trains in priority order. The generator picks one template
by day count and style preference, then fills every day from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from workout_engine.models.enums import (
    ABS,
    BACK,
    BICEPS,
    CALVES,
    CARDIO,
    CHEST,
    GLUTES,
    LEGS,
    SHOULDERS,
    TRAPS,
    TRICEPS,
    ExperienceLevel,
    SplitPreference,
)


@dataclass(frozen=True)
class DayTemplate:
    """Template for one training day.

    Attributes:
        day_number: 1-based position within the template.
        focus: Label shown to the user (e.g. "Back & Biceps").
        muscle_groups: Target groups, filled in this order.
    """

    day_number: int
    focus: str
    muscle_groups: tuple[str, ...]


@dataclass(frozen=True)
class SplitTemplate:
    """A named weekly schedule shape."""

    name: str
    days: tuple[DayTemplate, ...]


# ---------------------------------------------------------------------------
# Template definitions
# ---------------------------------------------------------------------------

FULL_BODY_AB = SplitTemplate(
    name="Full Body A/B",
    days=(
        DayTemplate(1, "Full Body A", (CHEST, BACK, LEGS, SHOULDERS, ABS)),
        DayTemplate(2, "Full Body B", (LEGS, BACK, CHEST, GLUTES, BICEPS, TRICEPS)),
    ),
)

FULL_BODY_ABC = SplitTemplate(
    name="Full Body A/B/C",
    days=(
        DayTemplate(1, "Full Body A", (CHEST, BACK, LEGS, ABS)),
        DayTemplate(2, "Full Body B", (LEGS, SHOULDERS, BACK, BICEPS)),
        DayTemplate(3, "Full Body C", (GLUTES, CHEST, SHOULDERS, TRICEPS, ABS)),
    ),
)

PUSH_PULL_LEGS = SplitTemplate(
    name="ABC (Push/Pull/Legs)",
    days=(
        DayTemplate(1, "Chest, Shoulders & Triceps", (CHEST, SHOULDERS, TRICEPS)),
        DayTemplate(2, "Back & Biceps", (BACK, BICEPS, TRAPS)),
        DayTemplate(3, "Legs & Glutes", (LEGS, GLUTES, CALVES)),
    ),
)

BODY_PART_ABCD = SplitTemplate(
    name="ABCD (Body Part)",
    days=(
        DayTemplate(1, "Chest & Triceps", (CHEST, TRICEPS)),
        DayTemplate(2, "Back & Biceps", (BACK, BICEPS)),
        DayTemplate(3, "Legs", (LEGS, CALVES)),
        DayTemplate(4, "Shoulders, Glutes & Abs", (SHOULDERS, GLUTES, ABS)),
    ),
)

UPPER_LOWER = SplitTemplate(
    name="Upper/Lower x2",
    days=(
        DayTemplate(1, "Upper Body A", (CHEST, BACK, SHOULDERS, BICEPS, TRICEPS)),
        DayTemplate(2, "Lower Body A", (LEGS, GLUTES, CALVES, ABS)),
        DayTemplate(3, "Upper Body B", (BACK, CHEST, SHOULDERS, TRICEPS, BICEPS)),
        DayTemplate(4, "Lower Body B", (GLUTES, LEGS, ABS, CALVES)),
    ),
)

FIVE_WAY = SplitTemplate(
    name="ABCDE (One Muscle Group per Day)",
    days=(
        DayTemplate(1, "Chest", (CHEST,)),
        DayTemplate(2, "Back", (BACK,)),
        DayTemplate(3, "Legs", (LEGS,)),
        DayTemplate(4, "Shoulders", (SHOULDERS,)),
        DayTemplate(5, "Arms", (BICEPS, TRICEPS)),
    ),
)

# Appended as day 6 to both five-day shapes
LEGS_ABS_CARDIO_DAY = DayTemplate(6, "Legs, Abs & Cardio", (LEGS, ABS, CARDIO))


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def select_split(
    days_per_week: int,
    preference: SplitPreference,
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER,
) -> SplitTemplate:
    """Pick the schedule shape for a day count and style preference.

    Always returns a template with exactly *days_per_week* days, numbered
    1..N.

    Raises:
        ValueError: If *days_per_week* is outside 2-6.
    """
    if days_per_week == 2:
        return FULL_BODY_AB

    if days_per_week == 3:
        if preference == SplitPreference.FULL_BODY:
            return FULL_BODY_ABC
        if preference == SplitPreference.NO_PREFERENCE and experience_level == ExperienceLevel.BEGINNER:
            return FULL_BODY_ABC
        return PUSH_PULL_LEGS

    if days_per_week == 4:
        if preference in (SplitPreference.ABC, SplitPreference.FULL_BODY):
            return UPPER_LOWER
        return BODY_PART_ABCD

    if days_per_week in (5, 6):
        if preference in (SplitPreference.ABCDE, SplitPreference.NO_PREFERENCE):
            base = FIVE_WAY
        else:
            base = _repeat_to_fill(PUSH_PULL_LEGS, 5)
        if days_per_week == 6:
            return SplitTemplate(
                name=f"{base.name} + Legs/Abs/Cardio",
                days=base.days + (LEGS_ABS_CARDIO_DAY,),
            )
        return base

    raise ValueError(f"No split template for {days_per_week} days per week")


def _repeat_to_fill(template: SplitTemplate, day_count: int) -> SplitTemplate:
    """Rotate a template's days until *day_count* days exist, renumbered."""
    days = tuple(
        replace(template.days[i % len(template.days)], day_number=i + 1)
        for i in range(day_count)
    )
    return SplitTemplate(name=f"{template.name} rotation", days=days)
