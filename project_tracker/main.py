"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from project_tracker import __version__
from project_tracker.api import auth, projects
from project_tracker.api.errors import setup_exception_handlers
from project_tracker.config import configure_logging, get_settings
from project_tracker.database import engine

settings = get_settings()
configure_logging(settings)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Project tracker API starting ({settings.environment})")
    yield
    engine.dispose()
    logger.info("Database connections closed")


app = FastAPI(
    title="Project Tracker API",
    description="Personal project tracker with per-user project records",
    version=__version__,
    lifespan=lifespan,
)

setup_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)

# Register routers
app.include_router(auth.router)
app.include_router(projects.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
