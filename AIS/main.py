import os
import logging
import logging.handlers
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from packages.ais_core.config import AISConfig
from packages.ais_core.logging import get_logger, LOG_FORMAT, LOG_DATEFMT

from AIS.api.health import router as health_router
from AIS.api.catalog import router as catalog_router
from AIS.api.interview import router as interview_router

config = AISConfig.load()
logger = get_logger("AIS.main")

def setup_runtime_logging():
    """
    Adds a file handler for runtime logs under logs/runtime/.
    """
    base_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../"))
    log_dir = os.path.join(base_dir, "logs", "runtime")
    os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=os.path.join(log_dir, "runtime.log"),
        when="midnight",
        interval=1,
        backupCount=30,
        encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    file_handler.setLevel(logging.INFO)

    # Root logger, so uvicorn events land here too
    logging.getLogger().addHandler(file_handler)

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_runtime_logging()
    logger.info(f"Starting {config.PROJECT_NAME} v{config.VERSION}...")
    if not config.voice_available:
        logger.warning("Voice disabled: set OPENAI_API_KEY to enable narration and transcription.")

    yield

    logger.info("Server shutting down...")

def create_app() -> FastAPI:
    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="", tags=["Status"])
    app.include_router(catalog_router, prefix="/api/v1")
    app.include_router(interview_router, prefix="/api/v1")

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("AIS.main:app", host="0.0.0.0", port=8000, reload=True)
