"""Tests for workout generation."""
import random
from types import SimpleNamespace

import pytest
from sqlalchemy import event

from app.models.database_models import Workout, WorkoutExercise
from app.models.schemas import Equipment
from app.services.exceptions import NoMatchingExercisesError, ValidationError
from app.services.workout_generator import (
    WorkoutGenerator,
    build_workout_name,
    calculate_exercise_count,
    filter_by_equipment,
    prescription_for_duration,
    sample_exercises,
    select_candidates,
)


class ReversingRandom(random.Random):
    """Deterministic stand-in: shuffling reverses the list."""

    def shuffle(self, x):
        x.reverse()


def _stub(name, muscle_group="Legs", equipment=("bodyweight_only",), id=None):
    return SimpleNamespace(id=id, name=name, muscle_group=muscle_group, equipment_needed=list(equipment))


class TestExerciseCount:
    """Exercise count scales with duration and is clamped to 3-8."""

    @pytest.mark.parametrize(
        "duration, expected",
        [(15, 3), (16, 4), (20, 5), (30, 7), (32, 8), (45, 8), (120, 8)],
    )
    def test_calculate_exercise_count(self, duration, expected):
        assert calculate_exercise_count(duration) == expected

    def test_floor_division_is_used(self):
        # 19 / 4 = 4.75 rounds down
        assert calculate_exercise_count(19) == 4


class TestPrescription:
    """Set/rep/rest values come from the duration tier."""

    @pytest.mark.parametrize("duration", [15, 25, 30])
    def test_short_tier(self, duration):
        tier = prescription_for_duration(duration)
        assert (tier.sets, tier.reps, tier.rest_seconds) == (2, "10-15", 45)

    @pytest.mark.parametrize("duration", [31, 45, 59])
    def test_medium_tier(self, duration):
        tier = prescription_for_duration(duration)
        assert (tier.sets, tier.reps, tier.rest_seconds) == (3, "8-12", 60)

    @pytest.mark.parametrize("duration", [60, 90, 120])
    def test_long_tier(self, duration):
        tier = prescription_for_duration(duration)
        assert (tier.sets, tier.reps, tier.rest_seconds) == (4, "6-10", 90)


class TestCandidateSelection:
    """Equipment overlap filtering and the bodyweight fallback."""

    def test_overlap_not_subset(self):
        split_squat = _stub("Bulgarian Split Squats", equipment=["bench", "dumbbells"])
        pull_up = _stub("Pull-ups", equipment=["pull_up_bar"])

        result = filter_by_equipment([split_squat, pull_up], [Equipment.DUMBBELLS])

        assert result == [split_squat]

    def test_accepts_plain_strings(self):
        swing = _stub("Kettlebell Swings", equipment=["kettlebells"])
        assert filter_by_equipment([swing], ["kettlebells"]) == [swing]

    def test_fallback_to_bodyweight(self):
        leg_press = _stub("Leg Press", equipment=["leg_press"])
        push_up = _stub("Push-ups", equipment=["bodyweight_only"])
        calf_raise = _stub("Calf Raises", equipment=["bodyweight_only", "dumbbells"])

        result = select_candidates([leg_press, push_up, calf_raise], ["barbell"])

        assert result == [push_up, calf_raise]

    def test_no_fallback_when_equipment_matches(self):
        push_up = _stub("Push-ups", equipment=["bodyweight_only"])
        swing = _stub("Kettlebell Swings", equipment=["kettlebells"])

        assert select_candidates([push_up, swing], ["kettlebells"]) == [swing]

    def test_raises_when_fallback_is_empty(self):
        leg_press = _stub("Leg Press", equipment=["leg_press"])

        with pytest.raises(NoMatchingExercisesError) as excinfo:
            select_candidates([leg_press], ["dumbbells"])

        assert excinfo.value.available_equipment == ["dumbbells"]

    def test_fallback_runs_even_if_bodyweight_was_requested(self):
        # bodyweight_only in the request matches nothing, so the fallback is
        # attempted and also comes up empty
        leg_press = _stub("Leg Press", equipment=["leg_press"])

        with pytest.raises(NoMatchingExercisesError):
            select_candidates([leg_press], ["bodyweight_only", "barbell"])


class TestSamplingAndNaming:
    def test_sample_never_exceeds_candidates(self):
        pool = [_stub(f"Move {i}") for i in range(3)]
        picked = sample_exercises(pool, 8, random.Random(1))
        assert len(picked) == 3
        assert {p.name for p in picked} == {p.name for p in pool}

    def test_sample_without_replacement(self):
        pool = [_stub(f"Move {i}") for i in range(12)]
        picked = sample_exercises(pool, 8, random.Random(7))
        assert len(picked) == 8
        assert len({p.name for p in picked}) == 8

    def test_sample_does_not_mutate_input(self):
        pool = [_stub(f"Move {i}") for i in range(5)]
        original = list(pool)
        sample_exercises(pool, 3, ReversingRandom())
        assert pool == original

    def test_name_uses_first_two_distinct_groups(self):
        picked = [
            _stub("Squats", "Legs"),
            _stub("Plank", "Core"),
            _stub("Lunges", "Legs"),
            _stub("Bridges", "Glutes"),
        ]
        assert build_workout_name(30, picked) == "30min Legs & Core Workout"

    def test_name_with_single_group(self):
        picked = [_stub("Squats", "Legs"), _stub("Lunges", "Legs")]
        assert build_workout_name(20, picked) == "20min Legs Workout"


class TestWorkoutGenerator:
    """Generation against an in-memory database."""

    def test_generates_workout_with_exercises(self, db_session, add_exercise):
        add_exercise("Push-ups", "chest", ["bodyweight_only"])
        add_exercise("Dumbbell Press", "chest", ["dumbbells", "bench"])
        add_exercise("Squats", "legs", ["bodyweight_only"])

        result = WorkoutGenerator(db_session).generate(
            user_id="test-user-123",
            duration_minutes=45,
            available_equipment=["dumbbells", "bench", "bodyweight_only"],
        )

        assert result.user_id == "test-user-123"
        assert result.duration_minutes == 45
        assert result.equipment_used == ["dumbbells", "bench", "bodyweight_only"]
        assert result.is_completed is False
        assert result.completed_at is None
        assert result.created_at is not None
        assert "45min" in result.name

        assert len(result.exercises) == 3
        for entry in result.exercises:
            assert (entry.sets, entry.reps, entry.rest_seconds) == (3, "8-12", 60)
            assert entry.name and entry.muscle_group and entry.instructions and entry.runner_benefit

    def test_persists_workout_and_assignments(self, db_session, add_exercise):
        add_exercise("Push-ups", "chest")

        result = WorkoutGenerator(db_session).generate("test-user-123", 45, ["bodyweight_only"])

        workouts = db_session.query(Workout).filter(Workout.id == result.id).all()
        assert len(workouts) == 1
        assert workouts[0].user_id == "test-user-123"
        assert workouts[0].is_completed is False

        rows = db_session.query(WorkoutExercise).filter(WorkoutExercise.workout_id == result.id).all()
        assert len(rows) == 1
        assert rows[0].sets == 3

    def test_order_index_is_contiguous_and_sorted(self, db_session, add_exercise):
        for i in range(10):
            add_exercise(f"Move {i}", "Core")

        result = WorkoutGenerator(db_session, rng=random.Random(42)).generate("runner", 60, ["bodyweight_only"])

        indexes = [entry.order_index for entry in result.exercises]
        assert indexes == list(range(8))
        assert len({entry.exercise_id for entry in result.exercises}) == 8

    def test_order_follows_sampled_sequence(self, db_session, add_exercise):
        first = add_exercise("Squats", "Legs")
        second = add_exercise("Plank", "Core")
        third = add_exercise("Glute Bridges", "Glutes")

        result = WorkoutGenerator(db_session, rng=ReversingRandom()).generate("runner", 15, ["bodyweight_only"])

        assert [entry.exercise_id for entry in result.exercises] == [third.id, second.id, first.id]
        assert result.name == "15min Glutes & Core Workout"

    def test_sets_and_reps_follow_duration(self, db_session, add_exercise):
        add_exercise("Push-ups", "chest")
        generator = WorkoutGenerator(db_session)

        short = generator.generate("runner", 20, ["bodyweight_only"])
        long = generator.generate("runner", 75, ["bodyweight_only"])

        assert (short.exercises[0].sets, short.exercises[0].rest_seconds) == (2, 45)
        assert short.exercises[0].reps == "10-15"
        assert (long.exercises[0].sets, long.exercises[0].rest_seconds) == (4, 90)
        assert long.exercises[0].reps == "6-10"

    def test_bodyweight_fallback(self, db_session, add_exercise):
        add_exercise("Leg Press", "Legs", ["leg_press"])
        add_exercise("Push-ups", "Chest", ["bodyweight_only"])

        result = WorkoutGenerator(db_session).generate("runner", 30, ["barbell"])

        assert [entry.name for entry in result.exercises] == ["Push-ups"]
        assert result.equipment_used == ["barbell"]

    def test_no_matching_exercises_creates_nothing(self, db_session, add_exercise):
        add_exercise("Leg Press", "legs", ["leg_press"])

        with pytest.raises(NoMatchingExercisesError):
            WorkoutGenerator(db_session).generate("runner", 45, ["dumbbells"])

        assert db_session.query(Workout).count() == 0

    def test_empty_catalog_raises(self, db_session):
        with pytest.raises(NoMatchingExercisesError):
            WorkoutGenerator(db_session).generate("runner", 45, ["bodyweight_only"])

    @pytest.mark.parametrize("duration", [0, 14, 121])
    def test_rejects_out_of_range_duration(self, db_session, duration):
        with pytest.raises(ValidationError):
            WorkoutGenerator(db_session).generate("runner", duration, ["bodyweight_only"])

    def test_rejects_empty_equipment(self, db_session):
        with pytest.raises(ValidationError):
            WorkoutGenerator(db_session).generate("runner", 30, [])

    def test_rejects_unknown_equipment(self, db_session):
        with pytest.raises(ValidationError):
            WorkoutGenerator(db_session).generate("runner", 30, ["rowing_machine"])

    def test_failed_commit_rolls_back_workout(self, db_session, add_exercise, monkeypatch):
        add_exercise("Push-ups", "Chest")

        def broken_commit():
            raise RuntimeError("disk full")

        monkeypatch.setattr(db_session, "commit", broken_commit)

        with pytest.raises(RuntimeError):
            WorkoutGenerator(db_session).generate("runner", 30, ["bodyweight_only"])

        monkeypatch.undo()
        assert db_session.query(Workout).count() == 0
        assert db_session.query(WorkoutExercise).count() == 0

    def test_reads_catalog_once_and_never_reloads(self, engine, db_session, add_exercise):
        for i in range(6):
            add_exercise(f"Move {i}", "Core")

        statements: list[str] = []

        def record(conn, cursor, statement, parameters, context, executemany):
            statements.append(statement.lstrip().split(None, 1)[0].upper())

        event.listen(engine, "before_cursor_execute", record)
        try:
            result = WorkoutGenerator(db_session).generate("runner", 30, ["bodyweight_only"])
        finally:
            event.remove(engine, "before_cursor_execute", record)

        assert statements.count("SELECT") == 1
        assert statements[0] == "SELECT"
        assert "INSERT" in statements
        assert len(result.exercises) == 6
        assert all(entry.id is not None for entry in result.exercises)

    @pytest.mark.parametrize("duration", ["30", 30.0, True, None])
    def test_non_integer_duration_rejected(self, db_session, add_exercise, duration):
        add_exercise("Push-ups", "Chest")

        with pytest.raises(ValidationError):
            WorkoutGenerator(db_session).generate("runner", duration, ["bodyweight_only"])

        assert db_session.query(Workout).count() == 0
