"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import activities, calendar, users, workout_assignments, workout_library

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    activities.router, prefix="/activities", tags=["Activities"]
)
api_router.include_router(
    workout_library.router,
    prefix="/workout-library",
    tags=["Workout library"],
)
api_router.include_router(
    workout_assignments.router,
    prefix="/workout-assignments",
    tags=["Workout assignments"],
)
api_router.include_router(
    calendar.router, prefix="/calendar", tags=["Calendar"]
)
