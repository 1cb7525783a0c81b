"""Shared fixtures: an in-memory SQLite database and an API test client."""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.db.session import get_db
from app.main import app
from app.models.activity import Activity
from app.models.user import User
from app.models.workout_assignment import WorkoutAssignment
from app.models.workout_library import WorkoutLibrary


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    app.dependency_overrides[get_db] = lambda: session
    app.state.plan_cache.clear()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ======================================================================
# Row builders
# ======================================================================


@pytest.fixture
def make_user(session):
    def _make(username: str, role: str = "athlete", **fields) -> User:
        user = User(email=f"{username}@schoolofsharks.io", username=username, role=role, **fields)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user
    return _make


@pytest.fixture
def make_activity(session):
    def _make(user: User, start_date_local: str, **fields) -> Activity:
        fields.setdefault("name", "Morning Ride")
        fields.setdefault("activity_type", "Ride")
        activity = Activity(user_id=user.id, start_date_local=start_date_local, **fields)
        session.add(activity)
        session.commit()
        session.refresh(activity)
        return activity
    return _make


@pytest.fixture
def make_template(session):
    def _make(name: str = "Sweet Spot 3x15", training_type: str = "threshold", minutes: int = 60,
              **fields) -> WorkoutLibrary:
        template = WorkoutLibrary(name=name, training_type=training_type, estimated_duration_minutes=minutes,
                                  **fields)
        session.add(template)
        session.commit()
        session.refresh(template)
        return template
    return _make


@pytest.fixture
def make_assignment(session):
    def _make(template: WorkoutLibrary, athlete: User, coach: User, scheduled_date: datetime.date,
              **fields) -> WorkoutAssignment:
        assignment = WorkoutAssignment(workout_library_id=template.id, assigned_to_user_id=athlete.id,
                                       assigned_by_user_id=coach.id, scheduled_date=scheduled_date, **fields)
        session.add(assignment)
        session.commit()
        session.refresh(assignment)
        return assignment
    return _make
