import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from progress_stream.config import settings
from progress_stream.routes import health, stream

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle events"""
    logger.info(
        f"Progress stream API started ({len(settings.stream_messages)} messages, "
        f"delay={settings.stream_delay_seconds}s)"
    )

    yield

    logger.info("Progress stream API shutting down")


app = FastAPI(
    title="Progress Stream API",
    description="Incremental progress updates over SSE",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware (browser clients call the stream cross-origin)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["Content-Type"],
)

# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(stream.router, prefix="/api", tags=["stream"])
