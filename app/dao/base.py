from collections.abc import Sequence
from typing import Generic, TypeVar

from loguru import logger
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from .database import Base

# Declare type parameter T constrained to subclasses of Base
T = TypeVar("T", bound=Base)


class BaseDAO(Generic[T]):
    """
    Base DAO class for asynchronous read access to SQLAlchemy models.
    """

    model: type[T]

    @classmethod
    async def find_all(cls, session: AsyncSession, filters: BaseModel | None) -> Sequence[T]:
        """
        Find all records by filters.
        :param session: SQLAlchemy async session
        :param filters: Pydantic model with filters or None
        :return: list of model instances in the order the store returns them
        """
        filter_dict = filters.model_dump(exclude_unset=True) if filters else {}

        logger.info(f"Searching all {cls.model.__name__} by filters: {filter_dict}")
        try:
            query = select(cls.model).filter_by(**filter_dict)
            result = await session.execute(query)
            records = result.scalars().all()
            logger.info(f"Found {len(records)} records.")
            return records
        except SQLAlchemyError as e:
            logger.error(f"Error while searching all records by filters {filter_dict}: {e}")
            raise
