from app.habit.models import FrequencyType, Habit, HabitStatus, HabitType
from app.habit.schemas import (
    FrequencyDto,
    FrequencyTypeDto,
    HabitDto,
    HabitStatusDto,
    HabitTypeDto,
    MilestoneDto,
    TargetDto,
)


def to_habit_dto(habit: Habit) -> HabitDto:
    """Project a stored habit onto its transport shape.

    Enumerations are matched by member name, so each stored value maps to the
    output value of the same name. Optional fields stay None when absent.
    """
    milestone = habit.milestone
    return HabitDto(
        id=habit.id,
        name=habit.name,
        description=habit.description,
        type=HabitTypeDto[HabitType(habit.type).name],
        frequency=FrequencyDto(
            type=FrequencyTypeDto[FrequencyType(habit.frequency.type).name],
            times_per_period=habit.frequency.times_per_period,
        ),
        target=TargetDto(value=habit.target.value, unit=habit.target.unit),
        status=HabitStatusDto[HabitStatus(habit.status).name],
        is_archived=habit.is_archived,
        end_date=habit.end_date,
        milestone=MilestoneDto(target=milestone.target, current=milestone.current) if milestone else None,
        created_at_utc=habit.created_at_utc,
        updated_at_utc=habit.updated_at_utc,
        last_completed_at_utc=habit.last_completed_at_utc,
    )
