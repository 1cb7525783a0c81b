"""
Enumerations shared by models, schemas and the calendar core.

Values are stored as plain strings in the database.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user in the coaching relationship."""
    ATHLETE = "athlete"
    COACH = "coach"


class AssignmentStatus(str, Enum):
    """Lifecycle state of a workout assignment."""
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    CANCELLED = "cancelled"


class AssignmentPriority(str, Enum):
    """Coach-set priority of a workout assignment."""
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class SegmentType(str, Enum):
    """Kind of block inside a workout template."""
    WARMUP = "warmup"
    WORK = "work"
    REST = "rest"
    COOLDOWN = "cooldown"
    RAMP = "ramp"
    TEST = "test"
