from pathlib import Path

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

# Define the base directory using pathlib
BASE_DIR = Path(__file__).resolve().parent.parent

# Configure loguru
logger.add(f"{BASE_DIR}/logs/logs.log", rotation="100 MB", level="INFO")


class Settings(BaseSettings):
    API_PREFIX: str = "api"  # Default value
    DOCS_URL: str | None = None  # Default value
    REDOC_URL: str | None = None  # Default value
    ALLOW_ORIGINS: list[str] = ["*"]  # CORS origins

    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "devhabit"

    # Configuration for loading environment variables from the .env file
    model_config = SettingsConfigDict(env_file=f"{BASE_DIR}/.env")


# Create an instance of the settings
settings = Settings()
# Get the database URL
database_url = f"postgresql+asyncpg://{settings.POSTGRES_USER}:{settings.POSTGRES_PASSWORD}@{settings.POSTGRES_HOST}:{settings.POSTGRES_PORT}/{settings.POSTGRES_DB}"
