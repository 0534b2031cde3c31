"""
Pytest fixtures for testing
"""
from datetime import date, datetime, UTC

import pytest
from loguru import logger

from app.habit.models import Frequency, FrequencyType, Habit, HabitStatus, HabitType, Milestone, Target


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test"""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="INFO")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def make_habit():
    """Factory for transient Habit entities"""

    def _make_habit(**overrides) -> Habit:
        values = {
            "id": "h_0194e8d2-7b6e-7c61-9f5e-2d6a1c3b4e5f",
            "name": "Running",
            "description": "Run around the park",
            "type": HabitType.MEASURABLE,
            "frequency": Frequency(type=FrequencyType.WEEKLY, times_per_period=2),
            "target": Target(value=10, unit="km"),
            "status": HabitStatus.ONGOING,
            "is_archived": False,
            "end_date": None,
            "milestone": None,
            "created_at_utc": datetime(2025, 1, 19, 12, 0, tzinfo=UTC),
            "updated_at_utc": None,
            "last_completed_at_utc": None,
        }
        values.update(overrides)
        return Habit(**values)

    return _make_habit


@pytest.fixture
def full_habit(make_habit):
    """Habit with every optional field set"""
    return make_habit(
        id="h_full",
        name="Reading",
        description="Read every day",
        type=HabitType.BINARY,
        frequency=Frequency(type=FrequencyType.DAILY, times_per_period=1),
        target=Target(value=30, unit="pages"),
        status=HabitStatus.COMPLETED,
        is_archived=True,
        end_date=date(2025, 12, 31),
        milestone=Milestone(target=100, current=42),
        updated_at_utc=datetime(2025, 2, 1, 8, 30, tzinfo=UTC),
        last_completed_at_utc=datetime(2025, 2, 2, 21, 15, tzinfo=UTC),
    )
