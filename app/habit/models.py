import enum
from dataclasses import dataclass
from datetime import date, datetime

from sqlalchemy import CheckConstraint, String, TIMESTAMP
from sqlalchemy.orm import composite, Mapped, mapped_column

from app.dao.database import Base


class HabitType(enum.IntEnum):
    NONE = 0
    BINARY = 1
    MEASURABLE = 2


class HabitStatus(enum.IntEnum):
    NONE = 0
    ONGOING = 1
    COMPLETED = 2


class FrequencyType(enum.IntEnum):
    NONE = 0
    DAILY = 1
    WEEKLY = 2
    MONTHLY = 3


@dataclass
class Frequency:
    type: int
    times_per_period: int


@dataclass
class Target:
    value: int
    unit: str


@dataclass
class Milestone:
    target: int
    current: int


class Habit(Base):
    __table_args__ = (
        CheckConstraint(
            "(milestone_target IS NULL) = (milestone_current IS NULL)", name="ck_habits_milestone_complete"
        ),
    )

    id: Mapped[str] = mapped_column(String(500), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    type: Mapped[int] = mapped_column(nullable=False)
    frequency: Mapped[Frequency] = composite(
        mapped_column("frequency_type"), mapped_column("frequency_times_per_period")
    )
    target: Mapped[Target] = composite(mapped_column("target_value"), mapped_column("target_unit", String(100)))
    status: Mapped[int] = mapped_column(nullable=False)
    is_archived: Mapped[bool] = mapped_column(default=False)
    end_date: Mapped[date | None]
    milestone_target: Mapped[int | None]
    milestone_current: Mapped[int | None]
    created_at_utc: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)
    updated_at_utc: Mapped[datetime | None] = mapped_column(TIMESTAMP(timezone=True))
    last_completed_at_utc: Mapped[datetime | None] = mapped_column(TIMESTAMP(timezone=True))

    @property
    def milestone(self) -> Milestone | None:
        # Optional embedded value: absent unless both columns are set
        if self.milestone_target is None or self.milestone_current is None:
            return None
        return Milestone(target=self.milestone_target, current=self.milestone_current)

    @milestone.setter
    def milestone(self, value: Milestone | None) -> None:
        self.milestone_target = value.target if value else None
        self.milestone_current = value.current if value else None

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id})"
