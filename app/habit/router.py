from fastapi import APIRouter
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.dao.session_maker import SessionDep
from app.habit.schemas import HabitDto
from app.habit.service import list_habits

router = APIRouter(prefix=f"/{settings.API_PREFIX}/habits", tags=["Habits"])


@router.get("")
async def get_habits(session: AsyncSession = SessionDep) -> list[HabitDto]:  # nosec # noqa B008
    return await list_habits(session=session)
