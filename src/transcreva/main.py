"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI

from transcreva.config import load_config
from transcreva.dependencies import get_session
from transcreva.logging import setup_logging
from transcreva.routes import media_router, transcription_router

logger = setup_logging()
patch_all()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting transcreva service")
    yield
    await get_session().close()


app = FastAPI(title="Transcreva", lifespan=lifespan)
app.include_router(transcription_router)
app.include_router(media_router)


def main():
    """Runs the service with uvicorn."""
    server = load_config().server
    uvicorn.run("transcreva.main:app", host=server.host, port=server.port)


if __name__ == "__main__":
    main()
