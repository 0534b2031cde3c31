from alembic import command
from alembic.config import Config
from loguru import logger
from sqlalchemy import Connection
from sqlalchemy.ext.asyncio import AsyncEngine

from app.config import BASE_DIR
from app.constants.messages import MIGRATIONS_APPLIED_MESSAGE, MIGRATIONS_FAILED_MESSAGE

from .database import engine as default_engine


def get_alembic_config() -> Config:
    return Config(str(BASE_DIR / "alembic.ini"))


def _upgrade(connection: Connection, alembic_cfg: Config) -> None:
    # env.py picks the shared connection up instead of opening its own
    alembic_cfg.attributes["connection"] = connection
    command.upgrade(alembic_cfg, "head")


async def apply_migrations(engine: AsyncEngine = default_engine) -> None:
    """
    Apply pending Alembic migrations up to head.
    Any failure is logged and re-raised so that startup aborts.
    :param engine: async engine of the habit store
    """
    try:
        async with engine.begin() as connection:
            await connection.run_sync(_upgrade, get_alembic_config())
        logger.info(MIGRATIONS_APPLIED_MESSAGE)
    except Exception as e:
        logger.opt(exception=e).error(f"{MIGRATIONS_FAILED_MESSAGE}: {e}")
        raise
