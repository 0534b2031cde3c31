import enum
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HabitTypeDto(str, enum.Enum):
    NONE = "None"
    BINARY = "Binary"
    MEASURABLE = "Measurable"


class HabitStatusDto(str, enum.Enum):
    NONE = "None"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"


class FrequencyTypeDto(str, enum.Enum):
    NONE = "None"
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class FrequencyDto(CamelModel):
    type: FrequencyTypeDto = Field(description="Recurrence period")
    times_per_period: int = Field(description="How many times per period")


class TargetDto(CamelModel):
    value: int = Field(description="Target quantity")
    unit: str = Field(description="Target unit")


class MilestoneDto(CamelModel):
    target: int = Field(description="Milestone target")
    current: int = Field(description="Current progress")


class HabitDto(CamelModel):
    id: str = Field(description="ID habit")
    name: str = Field(description="Habit name")
    description: str = Field(description="Habit description")
    type: HabitTypeDto = Field(description="Habit type")
    frequency: FrequencyDto = Field(description="How often the habit recurs")
    target: TargetDto = Field(description="Quantity the habit aims for")
    status: HabitStatusDto = Field(description="Habit status")
    is_archived: bool = Field(description="Archived flag")
    end_date: date | None = Field(default=None, description="Optional end date")
    milestone: MilestoneDto | None = Field(default=None, description="Optional progress marker")
    created_at_utc: datetime = Field(description="Creation time, UTC")
    updated_at_utc: datetime | None = Field(default=None, description="Last update time, UTC")
    last_completed_at_utc: datetime | None = Field(default=None, description="Last completion time, UTC")
