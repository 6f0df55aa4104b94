"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from squad_builder.config import settings
from squad_builder.api.routes.players import router as players_router
from squad_builder.api.routes.teams import router as teams_router
from squad_builder.api.routes.team_builder import router as team_builder_router
from squad_builder.repositories.database import Database
from squad_builder.repositories.player_repository import PlayerRepository
from squad_builder.repositories.team_repository import TeamRepository
from squad_builder.services.captcha_client import get_captcha_verifier

logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)


# Database path - use settings or default to data/squad_builder.duckdb in repo root
def get_database_path() -> Path:
    """Get the database path from settings or default location."""
    repo_root = Path(__file__).parent.parent.parent
    if settings.database_path:
        db_path = Path(settings.database_path)
        if db_path.is_absolute():
            return db_path
        # Relative path - resolve from repo root
        return repo_root / settings.database_path
    return repo_root / "data" / "squad_builder.duckdb"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: tests may have installed their own stores already
    if not hasattr(app.state, "player_repository") or not hasattr(app.state, "team_repository"):
        database = Database(get_database_path())
        app.state.player_repository = PlayerRepository(database)
        app.state.team_repository = TeamRepository(database)
    if not hasattr(app.state, "captcha_verifier"):
        app.state.captcha_verifier = get_captcha_verifier(
            settings.recaptcha_secret_key,
            verify_url=settings.recaptcha_verify_url,
            use_mock=not settings.enable_captcha,
        )
    yield
    # Shutdown: Clean up resources
    await app.state.captcha_verifier.close()


app = FastAPI(
    title="Squad Builder",
    description="CS player profiles and team synergy builder",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "squad-builder"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Squad Builder API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(players_router)
app.include_router(teams_router)
app.include_router(team_builder_router)
