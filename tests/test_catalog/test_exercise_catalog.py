"""Tests for the static exercise catalog and eligibility filtering."""

from __future__ import annotations

import pytest

from workout_engine.catalog import CATALOG, candidates_for, filter_eligible, get_exercise, is_eligible
from workout_engine.catalog.filters import allowed_equipment
from workout_engine.models.enums import (
    CHEST,
    FOREARMS,
    LEGS,
    MUSCLE_GROUPS,
    Equipment,
    ExperienceLevel,
    Venue,
)


class TestCatalogIntegrity:
    def test_ids_are_unique(self) -> None:
        ids = [ex.id for ex in CATALOG]
        assert len(ids) == len(set(ids))

    def test_every_exercise_targets_known_groups(self) -> None:
        for ex in CATALOG:
            assert ex.muscle_groups, f"{ex.name} has no muscle groups"
            assert ex.muscle_groups <= MUSCLE_GROUPS, f"{ex.name}: {ex.muscle_groups}"

    def test_every_venue_covers_major_groups(self) -> None:
        for venue in Venue:
            at_venue = [ex for ex in CATALOG if ex.venue == venue]
            for group in (CHEST, LEGS, "Back", "Shoulders", "Abs"):
                assert candidates_for(at_venue, group), f"No {group} exercise at {venue.name}"

    def test_gym_has_advanced_chest_work(self) -> None:
        advanced_chest = [
            ex for ex in CATALOG
            if ex.venue == Venue.GYM and ex.targets(CHEST) and ex.level == ExperienceLevel.ADVANCED
        ]
        assert len(advanced_chest) >= 2

    def test_get_exercise(self) -> None:
        assert get_exercise(101).name == "Barbell Bench Press"

    def test_get_exercise_unknown_id(self) -> None:
        with pytest.raises(KeyError):
            get_exercise(99999)


class TestAllowedEquipment:
    def test_gym_allows_everything(self) -> None:
        assert allowed_equipment(Venue.GYM, False) == frozenset(Equipment)

    def test_home_without_equipment(self) -> None:
        assert allowed_equipment(Venue.HOME, False) == frozenset({Equipment.BODYWEIGHT})

    def test_home_with_equipment_adds_dumbbells(self) -> None:
        assert allowed_equipment(Venue.HOME, True) == frozenset(
            {Equipment.BODYWEIGHT, Equipment.DUMBBELLS}
        )


class TestFilterEligible:
    def test_gym_user_gets_only_gym_exercises(self, gym_answers) -> None:
        eligible = filter_eligible(CATALOG, gym_answers)
        assert eligible
        assert all(ex.venue == Venue.GYM for ex in eligible)

    def test_home_without_equipment_is_bodyweight_only(self, home_beginner_answers) -> None:
        eligible = filter_eligible(CATALOG, home_beginner_answers)
        assert eligible
        assert all(ex.equipment == Equipment.BODYWEIGHT for ex in eligible)
        assert all(ex.venue == Venue.HOME for ex in eligible)

    def test_home_with_equipment_includes_dumbbells(self, answers_factory) -> None:
        answers = answers_factory(venue=Venue.HOME, has_home_equipment=True)
        eligible = filter_eligible(CATALOG, answers)
        assert any(ex.equipment == Equipment.DUMBBELLS for ex in eligible)

    def test_knee_injury_removes_leg_work(self, answers_factory) -> None:
        answers = answers_factory(injuries=frozenset({"Knees"}))
        eligible = filter_eligible(CATALOG, answers)
        assert not any(ex.targets(LEGS) for ex in eligible)

    def test_wrist_injury_removes_forearm_work(self, answers_factory) -> None:
        answers = answers_factory(injuries=frozenset({"Wrists"}))
        assert not is_eligible(get_exercise(503), answers)  # Hammer Curl
        assert is_eligible(get_exercise(501), answers)

    def test_preserves_catalog_order(self, gym_answers) -> None:
        eligible = filter_eligible(CATALOG, gym_answers)
        positions = [CATALOG.index(ex) for ex in eligible]
        assert positions == sorted(positions)

    def test_candidates_for(self, gym_answers) -> None:
        eligible = filter_eligible(CATALOG, gym_answers)
        forearm = candidates_for(eligible, FOREARMS)
        assert [ex.id for ex in forearm] == [503]
