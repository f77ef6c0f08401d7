"""Static exercise catalog shipped with the application.

Ids are grouped by region (1xx chest, 2xx back, 3xx legs, 4xx shoulders,
5xx arms, 6xx abs, 7xx cardio, 8xx home strength). The table is read-only
and loaded once at import.
"""

from __future__ import annotations

from workout_engine.models.enums import (
    ABS,
    BACK,
    BICEPS,
    CALVES,
    CARDIO,
    CHEST,
    FOREARMS,
    FULL_BODY,
    GLUTES,
    LEGS,
    LOWER_BACK,
    SHOULDERS,
    TRAPS,
    TRICEPS,
    Equipment,
    ExperienceLevel,
    Venue,
)
from workout_engine.models.exercise import Exercise

_BW = Equipment.BODYWEIGHT
_DB = Equipment.DUMBBELLS
_BB = Equipment.BARBELL
_MC = Equipment.MACHINE
_PU = Equipment.PULLUP_BAR

_BEG = ExperienceLevel.BEGINNER
_INT = ExperienceLevel.INTERMEDIATE
_ADV = ExperienceLevel.ADVANCED

_HOME = Venue.HOME
_GYM = Venue.GYM


def _ex(
    exercise_id: int,
    name: str,
    groups: tuple[str, ...],
    equipment: Equipment,
    level: ExperienceLevel,
    venue: Venue,
) -> Exercise:
    return Exercise(
        id=exercise_id,
        name=name,
        muscle_groups=frozenset(groups),
        equipment=equipment,
        level=level,
        venue=venue,
    )


EXERCISES: tuple[Exercise, ...] = (
    # --- Chest ---
    _ex(101, "Barbell Bench Press", (CHEST, SHOULDERS, TRICEPS), _BB, _INT, _GYM),
    _ex(102, "Incline Dumbbell Press", (CHEST, SHOULDERS), _DB, _INT, _GYM),
    _ex(103, "Flat Dumbbell Press", (CHEST, TRICEPS), _DB, _INT, _GYM),
    _ex(104, "Flat Dumbbell Fly", (CHEST,), _DB, _INT, _GYM),
    _ex(105, "Incline Dumbbell Fly", (CHEST,), _DB, _INT, _GYM),
    _ex(106, "Pec Deck", (CHEST,), _MC, _BEG, _GYM),
    _ex(107, "High Cable Crossover", (CHEST,), _MC, _ADV, _GYM),
    _ex(108, "Low Cable Crossover", (CHEST,), _MC, _ADV, _GYM),
    _ex(109, "Push-up", (CHEST, TRICEPS), _BW, _BEG, _HOME),
    _ex(110, "Incline Push-up", (CHEST,), _BW, _BEG, _HOME),
    _ex(111, "Seated Machine Chest Press", (CHEST, TRICEPS), _MC, _BEG, _GYM),
    _ex(112, "Dumbbell Pullover", (CHEST, BACK), _DB, _INT, _GYM),

    # --- Back ---
    _ex(201, "Lat Pulldown", (BACK, BICEPS), _MC, _BEG, _GYM),
    _ex(202, "Close-Grip Pulldown", (BACK,), _MC, _BEG, _GYM),
    _ex(203, "Seated Cable Row", (BACK,), _MC, _INT, _GYM),
    _ex(204, "Barbell Bent-Over Row", (BACK, LOWER_BACK), _BB, _ADV, _GYM),
    _ex(205, "One-Arm Dumbbell Row", (BACK, BICEPS), _DB, _INT, _GYM),
    _ex(206, "Machine Row", (BACK,), _MC, _BEG, _GYM),
    _ex(207, "Pull-up", (BACK, BICEPS), _PU, _ADV, _GYM),
    _ex(208, "Assisted Pull-up Machine", (BACK,), _MC, _BEG, _GYM),
    _ex(209, "Deadlift", (BACK, LEGS, LOWER_BACK), _BB, _ADV, _GYM),
    _ex(210, "Back Extension", (LOWER_BACK,), _MC, _BEG, _GYM),
    _ex(211, "Straight-Arm Cable Pulldown", (BACK,), _MC, _INT, _GYM),
    _ex(212, "T-Bar Row", (BACK,), _BB, _ADV, _GYM),

    # --- Legs: quads ---
    _ex(301, "Barbell Back Squat", (LEGS, GLUTES), _BB, _ADV, _GYM),
    _ex(302, "45-Degree Leg Press", (LEGS,), _MC, _BEG, _GYM),
    _ex(303, "Leg Extension", (LEGS,), _MC, _BEG, _GYM),
    _ex(304, "Hack Squat", (LEGS,), _MC, _INT, _GYM),
    _ex(305, "Smith Machine Squat", (LEGS,), _MC, _INT, _GYM),
    _ex(306, "Bulgarian Split Squat", (LEGS, GLUTES), _DB, _ADV, _GYM),
    _ex(307, "Dumbbell Walking Lunge", (LEGS, GLUTES), _DB, _INT, _GYM),
    _ex(308, "Goblet Squat", (LEGS,), _DB, _BEG, _GYM),
    _ex(309, "Front Squat", (LEGS,), _BB, _ADV, _GYM),

    # --- Legs: hamstrings, glutes, calves ---
    _ex(351, "Lying Leg Curl", (LEGS,), _MC, _BEG, _GYM),
    _ex(352, "Seated Leg Curl", (LEGS,), _MC, _BEG, _GYM),
    _ex(353, "Barbell Romanian Deadlift", (LEGS, GLUTES), _BB, _INT, _GYM),
    _ex(354, "Dumbbell Romanian Deadlift", (LEGS, GLUTES), _DB, _BEG, _GYM),
    _ex(355, "Barbell Hip Thrust", (GLUTES,), _BB, _INT, _GYM),
    _ex(356, "Machine Hip Thrust", (GLUTES,), _MC, _BEG, _GYM),
    _ex(357, "Hip Abduction Machine", (GLUTES,), _MC, _BEG, _GYM),
    _ex(358, "Cable Glute Kickback", (GLUTES,), _MC, _INT, _GYM),
    _ex(359, "Seated Calf Raise", (CALVES,), _MC, _BEG, _GYM),
    _ex(360, "Standing Smith Calf Raise", (CALVES,), _MC, _BEG, _GYM),

    # --- Shoulders ---
    _ex(401, "Dumbbell Shoulder Press", (SHOULDERS,), _DB, _INT, _GYM),
    _ex(402, "Barbell Overhead Press", (SHOULDERS,), _BB, _ADV, _GYM),
    _ex(403, "Machine Shoulder Press", (SHOULDERS,), _MC, _BEG, _GYM),
    _ex(404, "Dumbbell Lateral Raise", (SHOULDERS,), _DB, _BEG, _GYM),
    _ex(405, "Cable Lateral Raise", (SHOULDERS,), _MC, _INT, _GYM),
    _ex(406, "Dumbbell Front Raise", (SHOULDERS,), _DB, _BEG, _GYM),
    _ex(407, "Reverse Pec Deck", (SHOULDERS, BACK), _MC, _BEG, _GYM),
    _ex(408, "Barbell Upright Row", (SHOULDERS, TRAPS), _BB, _INT, _GYM),
    _ex(409, "Dumbbell Shrug", (TRAPS,), _DB, _BEG, _GYM),

    # --- Arms ---
    _ex(501, "Barbell Curl", (BICEPS,), _BB, _BEG, _GYM),
    _ex(502, "Alternating Dumbbell Curl", (BICEPS,), _DB, _BEG, _GYM),
    _ex(503, "Hammer Curl", (BICEPS, FOREARMS), _DB, _BEG, _GYM),
    _ex(504, "Machine Preacher Curl", (BICEPS,), _MC, _BEG, _GYM),
    _ex(505, "Concentration Curl", (BICEPS,), _DB, _INT, _GYM),
    _ex(506, "Rope Triceps Pushdown", (TRICEPS,), _MC, _BEG, _GYM),
    _ex(507, "Bar Triceps Pushdown", (TRICEPS,), _MC, _BEG, _GYM),
    _ex(508, "Skull Crusher", (TRICEPS,), _BB, _INT, _GYM),
    _ex(509, "Overhead Dumbbell Triceps Extension", (TRICEPS,), _DB, _INT, _GYM),
    _ex(510, "Bench Dip", (TRICEPS,), _BW, _BEG, _HOME),
    _ex(511, "Parallel Bar Dip", (TRICEPS, CHEST), _BW, _ADV, _GYM),

    # --- Abs ---
    _ex(601, "Floor Crunch", (ABS,), _BW, _BEG, _HOME),
    _ex(602, "Lying Leg Raise", (ABS,), _BW, _INT, _HOME),
    _ex(603, "Plank", (ABS,), _BW, _BEG, _HOME),
    _ex(604, "Machine Crunch", (ABS,), _MC, _BEG, _GYM),
    _ex(605, "Cable Crunch", (ABS,), _MC, _INT, _GYM),
    _ex(606, "Bicycle Crunch", (ABS,), _BW, _INT, _HOME),
    _ex(607, "Ab Wheel Rollout", (ABS,), _BW, _ADV, _GYM),

    # --- Cardio ---
    _ex(701, "Incline Treadmill Walk", (CARDIO, LEGS), _MC, _BEG, _GYM),
    _ex(702, "Treadmill Run", (CARDIO,), _MC, _INT, _GYM),
    _ex(703, "Elliptical", (CARDIO,), _MC, _BEG, _GYM),
    _ex(704, "Stationary Bike", (CARDIO, LEGS), _MC, _BEG, _GYM),
    _ex(705, "Stair Climber", (CARDIO, LEGS), _MC, _ADV, _GYM),
    _ex(706, "Rowing Machine", (CARDIO, BACK), _MC, _ADV, _GYM),
    _ex(707, "Jump Rope", (CARDIO,), _BW, _INT, _HOME),
    _ex(708, "Jumping Jacks", (CARDIO,), _BW, _BEG, _HOME),
    _ex(709, "Burpees", (CARDIO, FULL_BODY), _BW, _ADV, _HOME),

    # --- Home strength ---
    _ex(801, "Bodyweight Squat", (LEGS, GLUTES), _BW, _BEG, _HOME),
    _ex(802, "Glute Bridge", (GLUTES,), _BW, _BEG, _HOME),
    _ex(803, "Pike Push-up", (SHOULDERS, TRICEPS), _BW, _ADV, _HOME),
    _ex(804, "Superman Hold", (LOWER_BACK, BACK), _BW, _BEG, _HOME),
    _ex(805, "Prone Y-T-W Raise", (BACK, SHOULDERS), _BW, _BEG, _HOME),
    _ex(806, "Mountain Climbers", (CARDIO, ABS), _BW, _INT, _HOME),
    _ex(807, "Single-Leg Calf Raise", (CALVES,), _BW, _BEG, _HOME),
    _ex(808, "Diamond Push-up", (TRICEPS, CHEST), _BW, _ADV, _HOME),
    _ex(809, "Jump Squat", (LEGS, CARDIO), _BW, _ADV, _HOME),
    _ex(810, "Reverse Lunge", (LEGS, GLUTES), _BW, _INT, _HOME),
    _ex(821, "Dumbbell Floor Press", (CHEST, TRICEPS), _DB, _INT, _HOME),
    _ex(822, "Dumbbell Bent-Over Row", (BACK, BICEPS), _DB, _INT, _HOME),
    _ex(823, "Dumbbell Goblet Squat", (LEGS, GLUTES), _DB, _BEG, _HOME),
    _ex(824, "Seated Dumbbell Shoulder Press", (SHOULDERS,), _DB, _INT, _HOME),
    _ex(825, "Dumbbell Biceps Curl", (BICEPS,), _DB, _BEG, _HOME),
    _ex(826, "Dumbbell Overhead Extension", (TRICEPS,), _DB, _INT, _HOME),
    _ex(827, "Dumbbell Stiff-Leg Deadlift", (LEGS, GLUTES), _DB, _INT, _HOME),
    _ex(828, "Dumbbell Lateral Raise (Home)", (SHOULDERS,), _DB, _BEG, _HOME),
    _ex(829, "Renegade Row", (BACK, ABS), _DB, _ADV, _HOME),
    _ex(830, "Dumbbell Thruster", (FULL_BODY, LEGS, SHOULDERS), _DB, _ADV, _HOME),
)
