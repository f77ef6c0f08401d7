"""Enumerations and domain constants for the workout engine.

Wire values (the strings stored by the host application) live next to the
enums so serialization and questionnaire parsing share one source of truth.
"""

from enum import IntEnum, auto


class Venue(IntEnum):
    """Where the user trains."""

    HOME = auto()
    GYM = auto()


class Equipment(IntEnum):
    """Equipment an exercise requires."""

    BODYWEIGHT = auto()
    DUMBBELLS = auto()
    BARBELL = auto()
    MACHINE = auto()      # Includes cable stations
    PULLUP_BAR = auto()


class ExperienceLevel(IntEnum):
    """Exercise difficulty / user experience, ordered easiest first."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()


class Goal(IntEnum):
    """Primary training goal from the questionnaire."""

    FAT_LOSS = auto()
    MUSCLE_GAIN = auto()
    MAINTAIN = auto()


class BodyType(IntEnum):
    """Somatotype reported by the user."""

    ECTO = auto()
    MESO = auto()
    ENDO = auto()


class ProgressionIntensity(IntEnum):
    """How quickly the user wants volume to ramp up."""

    SLOW = auto()
    MODERATE = auto()
    AGGRESSIVE = auto()


class SplitPreference(IntEnum):
    """Preferred way of dividing muscle groups across the week."""

    ABC = auto()            # 3 rotating workouts
    ABCD = auto()           # 4 body-part days
    ABCDE = auto()          # 1 muscle group per day
    FULL_BODY = auto()
    NO_PREFERENCE = auto()


class Rating(IntEnum):
    """Post-session subjective intensity feedback."""

    LIGHT = auto()
    JUST_RIGHT = auto()
    HARD = auto()


class SessionStatus(IntEnum):
    """Lifecycle of a workout session."""

    IDLE = auto()
    ACTIVE = auto()
    CLOSED = auto()


# ---------------------------------------------------------------------------
# Wire values
# ---------------------------------------------------------------------------

RATING_WIRE_VALUES: dict[Rating, str] = {
    Rating.LIGHT: "light",
    Rating.JUST_RIGHT: "just_right",
    Rating.HARD: "hard",
}

# Score used by the feedback EWMA: positive = sessions feel too hard
RATING_SCORES: dict[Rating, float] = {
    Rating.LIGHT: -1.0,
    Rating.JUST_RIGHT: 0.0,
    Rating.HARD: 1.0,
}

# ---------------------------------------------------------------------------
# Muscle groups and injury areas
# ---------------------------------------------------------------------------

CHEST = "Chest"
BACK = "Back"
LOWER_BACK = "LowerBack"
LEGS = "Legs"
GLUTES = "Glutes"
CALVES = "Calves"
SHOULDERS = "Shoulders"
TRAPS = "Traps"
BICEPS = "Biceps"
TRICEPS = "Triceps"
FOREARMS = "Forearms"
ABS = "Abs"
CARDIO = "Cardio"
FULL_BODY = "FullBody"

MUSCLE_GROUPS = frozenset({
    CHEST, BACK, LOWER_BACK, LEGS, GLUTES, CALVES, SHOULDERS, TRAPS,
    BICEPS, TRICEPS, FOREARMS, ABS, CARDIO, FULL_BODY,
})

# Questionnaire shortcuts that stand for several muscle groups
MUSCLE_ALIASES: dict[str, tuple[str, ...]] = {
    "Arms": (BICEPS, TRICEPS),
}

# Joint areas offered as injuries, mapped to the muscle groups they load
INJURY_AREAS: dict[str, frozenset[str]] = {
    "Knees": frozenset({LEGS}),
    "Wrists": frozenset({FOREARMS}),
}

NO_INJURIES = "None"
# Spellings of the sentinel accepted from host data
NO_INJURIES_ALIASES = frozenset({NO_INJURIES, "Nenhuma"})

# ---------------------------------------------------------------------------
# Questionnaire bounds
# ---------------------------------------------------------------------------
MIN_DAYS_PER_WEEK = 2
MAX_DAYS_PER_WEEK = 6
MAX_PRIORITY_MUSCLES = 4

# ---------------------------------------------------------------------------
# Plan generation
# ---------------------------------------------------------------------------
# A day may exceed the per-day target by this many exercises before truncation
DAY_EXERCISE_CAP_MARGIN = 2

# Extra slots granted to a priority muscle group
PRIORITY_EXTRA_SLOTS = 1

# Duration estimate: seconds of work per set plus a fixed warm-up
SET_WORK_SECONDS = 45
WARMUP_MINUTES = 5

# Feedback-driven volume adjustment
FEEDBACK_EWMA_SPAN = 3
FEEDBACK_HARD_THRESHOLD = 0.5
FEEDBACK_LIGHT_THRESHOLD = -0.5
MIN_SETS = 2
MAX_SETS = 5
AGGRESSIVE_REST_CUT_S = 15
MIN_REST_S = 30

# ---------------------------------------------------------------------------
# Session runtime
# ---------------------------------------------------------------------------
# Day index recorded for sessions not tied to any plan day
FREESTYLE_DAY_INDEX = -1
