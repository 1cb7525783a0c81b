"""Repository tests on an in-memory SQLite database."""

import datetime

import pytest

from app.db.repositories.activity import ActivityRepository
from app.db.repositories.user import UserRepository
from app.db.repositories.workout_assignment import WorkoutAssignmentRepository
from app.db.repositories.workout_library import WorkoutLibraryRepository
from app.models.workout_library import WorkoutLibrary, WorkoutSegment


# ======================================================================
# Users
# ======================================================================


class TestUserRepository:
    def test_get_by_email(self, session, make_user):
        user = make_user("bruce")
        assert UserRepository(session).get_by_email("bruce@schoolofsharks.io").id == user.id

    def test_filter_by_role(self, session, make_user):
        make_user("bruce")
        make_user("nemo", role="coach")
        coaches = UserRepository(session).get_all(role="coach")
        assert [u.username for u in coaches] == ["nemo"]

    @pytest.mark.parametrize(
        "email, username, exists",
        [
            ("bruce@schoolofsharks.io", "other", True),
            ("other@schoolofsharks.io", "bruce", True),
            ("other@schoolofsharks.io", "other", False),
        ],
    )
    def test_exists_by_email_or_username(self, session, make_user, email, username, exists):
        make_user("bruce")
        assert UserRepository(session).exists_by_email_or_username(email, username) is exists


# ======================================================================
# Activities
# ======================================================================


class TestActivityRepository:
    def test_local_date_range_is_inclusive(self, session, make_user, make_activity):
        athlete = make_user("bruce")
        make_activity(athlete, "2025-06-30T23:59:59+02:00")
        first = make_activity(athlete, "2025-07-01T00:00:00+02:00")
        last = make_activity(athlete, "2025-07-31T23:59:59-05:00")
        make_activity(athlete, "2025-08-01T00:00:00+02:00")

        entries = ActivityRepository(session).get_by_user_local_date_range(
            athlete.id, datetime.date(2025, 7, 1), datetime.date(2025, 7, 31))
        assert [e.id for e in entries] == [first.id, last.id]

    def test_range_is_per_user(self, session, make_user, make_activity):
        bruce, anchor = make_user("bruce"), make_user("anchor")
        make_activity(anchor, "2025-07-10T08:00:00+00:00")
        entries = ActivityRepository(session).get_by_user_local_date_range(
            bruce.id, datetime.date(2025, 7, 1), datetime.date(2025, 7, 31))
        assert entries == []

    def test_range_limit(self, session, make_user, make_activity):
        athlete = make_user("bruce")
        for day in range(1, 6):
            make_activity(athlete, f"2025-07-{day:02d}T08:00:00+00:00")
        entries = ActivityRepository(session).get_by_user_local_date_range(
            athlete.id, datetime.date(2025, 7, 1), datetime.date(2025, 7, 31), limit=3)
        assert [e.start_date_local[:10] for e in entries] == ["2025-07-01", "2025-07-02", "2025-07-03"]

    def test_search_filters_and_total(self, session, make_user, make_activity):
        athlete = make_user("bruce")
        make_activity(athlete, "2025-07-01T08:00:00+00:00", activity_type="Ride", has_power_data=True)
        make_activity(athlete, "2025-07-02T08:00:00+00:00", activity_type="Run")
        make_activity(athlete, "2025-07-03T08:00:00+00:00", activity_type="Ride", trainer=True)

        rides, total = ActivityRepository(session).search(athlete.id, activity_type="Ride", limit=1)
        assert total == 2
        assert len(rides) == 1
        assert rides[0].start_date_local.startswith("2025-07-03")

        powered, total = ActivityRepository(session).search(athlete.id, has_power_data=True)
        assert total == 1 and powered[0].start_date_local.startswith("2025-07-01")

    def test_search_ascending(self, session, make_user, make_activity):
        athlete = make_user("bruce")
        make_activity(athlete, "2025-07-02T08:00:00+00:00")
        make_activity(athlete, "2025-07-01T08:00:00+00:00")
        entries, _ = ActivityRepository(session).search(athlete.id, sort_order="asc")
        assert [e.start_date_local[:10] for e in entries] == ["2025-07-01", "2025-07-02"]

    def test_get_by_provider_id(self, session, make_user, make_activity):
        athlete = make_user("bruce")
        activity = make_activity(athlete, "2025-07-01T08:00:00+00:00", intervals_icu_id="i123")
        assert ActivityRepository(session).get_by_provider_id(athlete.id, "i123").id == activity.id
        assert ActivityRepository(session).get_by_provider_id(athlete.id, "i999") is None


# ======================================================================
# Workout library
# ======================================================================


class TestWorkoutLibraryRepository:
    def test_create_with_segments(self, session):
        repository = WorkoutLibraryRepository(session)
        template = repository.create(
            WorkoutLibrary(name="Over-Unders", training_type="threshold", estimated_duration_minutes=75),
            [WorkoutSegment(segment_order=2, segment_type="work", duration_minutes=40),
             WorkoutSegment(segment_order=1, segment_type="warmup", duration_minutes=15)],
        )
        segments = repository.get_segments(template.id)
        assert [s.segment_order for s in segments] == [1, 2]
        assert repository.count_segments([template.id]) == {template.id: 2}

    def test_inactive_hidden(self, session, make_template):
        template = make_template(is_active=False)
        repository = WorkoutLibraryRepository(session)
        assert repository.get_by_id(template.id) is None
        assert repository.get_by_id(template.id, include_inactive=True) is not None
        assert repository.search()[1] == 0

    def test_search(self, session, make_template):
        make_template("Sweet Spot 3x15", "threshold", 60, description="Classic")
        make_template("Long Endurance", "endurance", 180)
        make_template("Recovery Spin", "recovery", 45)
        repository = WorkoutLibraryRepository(session)

        assert repository.search(training_type="endurance")[1] == 1
        assert repository.search(max_duration=60)[1] == 2
        assert repository.search(min_duration=60, max_duration=120)[1] == 1
        found, total = repository.search(search="spot")
        assert total == 1 and found[0].name == "Sweet Spot 3x15"


# ======================================================================
# Workout assignments
# ======================================================================


class TestWorkoutAssignmentRepository:
    def test_date_range_includes_month_ends(self, session, make_user, make_template, make_assignment):
        athlete, coach = make_user("bruce"), make_user("nemo", role="coach")
        template = make_template()
        make_assignment(template, athlete, coach, datetime.date(2025, 6, 30))
        first = make_assignment(template, athlete, coach, datetime.date(2025, 7, 1))
        last = make_assignment(template, athlete, coach, datetime.date(2025, 7, 31))
        make_assignment(template, athlete, coach, datetime.date(2025, 8, 1))

        rows = WorkoutAssignmentRepository(session).get_by_user_date_range(
            athlete.id, datetime.date(2025, 7, 1), datetime.date(2025, 7, 31))
        assert [r.assignment.id for r in rows] == [first.id, last.id]
        assert rows[0].workout.id == template.id
        assert rows[0].athlete.username == "bruce"
        assert rows[0].coach.username == "nemo"

    def test_duplicates_on_same_day(self, session, make_user, make_template, make_assignment):
        athlete, coach = make_user("bruce"), make_user("nemo", role="coach")
        template = make_template()
        make_assignment(template, athlete, coach, datetime.date(2025, 7, 15))
        make_assignment(template, athlete, coach, datetime.date(2025, 7, 15))
        rows = WorkoutAssignmentRepository(session).get_by_user_date_range(
            athlete.id, datetime.date(2025, 7, 1), datetime.date(2025, 7, 31))
        assert len(rows) == 2

    def test_search_filters(self, session, make_user, make_template, make_assignment):
        athlete, coach = make_user("bruce"), make_user("nemo", role="coach")
        threshold, endurance = make_template(), make_template("Long Ride", "endurance", 180)
        make_assignment(threshold, athlete, coach, datetime.date(2025, 7, 1), status="completed")
        make_assignment(endurance, athlete, coach, datetime.date(2025, 7, 2), priority="high")
        make_assignment(endurance, athlete, coach, datetime.date(2025, 8, 2))
        repository = WorkoutAssignmentRepository(session)

        assert repository.search(status="completed")[1] == 1
        assert repository.search(priority="high")[1] == 1
        assert repository.search(training_type="endurance")[1] == 2
        assert repository.search(assigned_by_user_id=coach.id)[1] == 3
        rows, total = repository.search(scheduled_date_from=datetime.date(2025, 7, 1),
                                        scheduled_date_to=datetime.date(2025, 7, 31))
        assert total == 2
        assert [r.assignment.scheduled_date for r in rows] == [datetime.date(2025, 7, 2), datetime.date(2025, 7, 1)]

    def test_delete(self, session, make_user, make_template, make_assignment):
        athlete, coach = make_user("bruce"), make_user("nemo", role="coach")
        assignment_id = make_assignment(make_template(), athlete, coach, datetime.date(2025, 7, 1)).id
        repository = WorkoutAssignmentRepository(session)
        assert repository.delete(assignment_id) is True
        assert repository.delete(assignment_id) is False
        assert repository.get_row(assignment_id) is None
