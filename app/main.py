from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.config import settings
from app.routers.time import router as time_router

logger = logging.getLogger(__name__)


def setup_logging(level: str = settings.log_level) -> None:
    root = logging.getLogger("app")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("time service ready, route /api/time")
    yield
    logger.info("time service stopped")


setup_logging()

# Only /api/time is served; docs, schema and slash redirects would add routes.
app = FastAPI(
    title="Time Service",
    version="0.1.0",
    description="Returns the current server time as plain text.",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
    lifespan=lifespan,
)

app.include_router(time_router)


def run() -> None:
    logger.info("listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
