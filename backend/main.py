from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from logging.handlers import RotatingFileHandler
import sys

from api import business_cards
from config.app_config import LOG_DIR, LOG_LEVEL, cors_allow_origins
from init_db import init_database
from utils.logging_utils import ContextFilter, set_logging_context, clear_logging_context, new_request_id


def configure_logging():
    """Attach rotating file and console handlers to the root logger (once)."""
    root_logger = logging.getLogger()
    if any(getattr(handler, '_business_card_handler', False) for handler in root_logger.handlers):
        return

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / "backend.log"
    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s')

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    console_handler = logging.StreamHandler(sys.stdout)

    for handler in (file_handler, console_handler):
        handler.setFormatter(log_formatter)
        handler.addFilter(ContextFilter())
        handler._business_card_handler = True
        root_logger.addHandler(handler)

    root_logger.setLevel(LOG_LEVEL)
    logging.getLogger(__name__).info(f"Logging initialized: {log_file}")


configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    init_database()
    logger.info("✅ Business card API ready")
    yield
    logger.info("Business card API shutting down")


app = FastAPI(
    title="Business Card Manager API",
    description="Create, import, search and export business cards",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_context(request: Request, call_next):
    """Tag every log line of a request with one request id."""
    request_id = request.headers.get("X-Request-ID") or new_request_id()
    set_logging_context(request_id=request_id)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(business_cards.router, tags=["business-cards"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
