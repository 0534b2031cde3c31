from collections.abc import AsyncGenerator

from fastapi import Depends
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .database import async_session_maker


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session dependency.
    Opens a session for the duration of the request and closes it afterwards.
    """
    async with async_session_maker() as session:
        try:
            yield session
        except SQLAlchemyError as e:
            logger.error(f"Session error, rolling back: {e}")
            await session.rollback()
            raise


SessionDep = Depends(get_session)
