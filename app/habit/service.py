from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.habit.dao import HabitDAO
from app.habit.mapping import to_habit_dto
from app.habit.models import Habit
from app.habit.schemas import HabitDto


class HabitRepository(Protocol):
    async def find_all(self, session: AsyncSession, filters: BaseModel | None) -> Sequence[Habit]: ...


async def list_habits(session: AsyncSession, repository: HabitRepository = HabitDAO) -> list[HabitDto]:
    """Fetch every habit and project each row, keeping the store's order."""
    habits = await repository.find_all(session=session, filters=None)
    return [to_habit_dto(habit) for habit in habits]
