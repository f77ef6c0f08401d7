"""Plan models: VolumeParameters, TrainingDay and Plan."""

from __future__ import annotations

from dataclasses import dataclass, field

from workout_engine.models.exercise import PlannedExercise


@dataclass(frozen=True)
class VolumeParameters:
    """Day-global sets / reps / rest applied to every generated exercise."""

    sets: int
    reps: str
    rest_seconds: int


@dataclass(frozen=True)
class TrainingDay:
    """One day of a plan.

    ``day_number`` is 1-based within the plan. Placeholder days (rest or
    freestyle) are the only days allowed to carry no exercises.
    """

    day_number: int
    focus: str
    estimated_minutes: int
    exercises: tuple[PlannedExercise, ...] = field(default_factory=tuple)
    is_placeholder: bool = False

    @property
    def total_sets(self) -> int:
        return sum(ex.set_count for ex in self.exercises)

    def find(self, uid: str) -> PlannedExercise | None:
        for ex in self.exercises:
            if ex.uid == uid:
                return ex
        return None


@dataclass(frozen=True)
class Plan:
    """Output of plan generation: an ordered list of training days."""

    days: tuple[TrainingDay, ...] = field(default_factory=tuple)
    split_name: str = ""
    exercises_per_day_target: int = 0
    volume: VolumeParameters | None = None

    def __len__(self) -> int:
        return len(self.days)

    def __getitem__(self, index: int) -> TrainingDay:
        return self.days[index]

    def __iter__(self):
        return iter(self.days)

    @property
    def exercise_ids(self) -> frozenset[int]:
        """All catalog ids referenced anywhere in the plan."""
        return frozenset(
            ex.exercise_id
            for day in self.days
            for ex in day.exercises
            if ex.exercise_id is not None
        )
