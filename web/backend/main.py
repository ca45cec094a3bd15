from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from sample_scout.core.config import Config, load_config
from sample_scout.core.database import init_database
from sample_scout.core.output import setup_from_config


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_from_config(load_config().logging)
    init_database()
    logger.info("Sample Scout API started")
    yield


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the API app. CORS origins come from [web] allowed_origins,
    overridden by ALLOWED_ORIGINS."""
    if config is None:
        config = load_config()

    app = FastAPI(title="Sample Scout Web API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.web.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    from web.backend.routers import libraries, search, sounds, users

    app.include_router(search.router, prefix="/api", tags=["search"])
    app.include_router(sounds.router, prefix="/api", tags=["sounds"])
    app.include_router(libraries.router, prefix="/api", tags=["libraries"])
    app.include_router(users.router, prefix="/api", tags=["users"])

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
