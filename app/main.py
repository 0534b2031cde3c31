from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.dao.database import engine
from app.dao.migrations import apply_migrations
from app.habit.router import router as router_habit


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to serve against an un-migrated schema
    await apply_migrations()
    yield
    await engine.dispose()


# Create an instance of FastAPI with documentation URLs loaded from environment variables
app = FastAPI(
    docs_url=settings.DOCS_URL if settings.DOCS_URL != "None" else None,
    redoc_url=settings.REDOC_URL if settings.REDOC_URL != "None" else None,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,  # Use configuration from settings
    allow_credentials=True,
    allow_methods=["*"],  # Allow all methods
    allow_headers=["*"],  # Allow all headers
)

app.include_router(router_habit)
