"""
Runtime Configuration

Reads deployment settings from environment variables once at import time.

Variables:
- BUSINESS_CARD_DB_URL: SQLAlchemy database URL (defaults to a local SQLite file)
- BUSINESS_CARD_LOG_DIR: Directory for rotating log files
- BUSINESS_CARD_LOG_LEVEL: Root log level name
- PHOTO_MAX_WIDTH / PHOTO_MAX_HEIGHT: Bounding box uploaded photos are shrunk into
- PHOTO_JPEG_QUALITY: JPEG quality used when re-encoding photos
- CORS_ALLOW_ORIGINS: Comma-separated list of allowed browser origins
"""
import os
import logging
from pathlib import Path

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

APP_DIR = Path.home() / ".business-card-manager"


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, '').strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'", missing_keys=[name])
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}", missing_keys=[name])
    return value


def database_url() -> str:
    """
    Resolve the database URL.

    Returns:
        The configured URL, or a SQLite file under the app directory
    """
    url = os.environ.get('BUSINESS_CARD_DB_URL', '').strip()
    if url:
        return url
    APP_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{APP_DIR / 'business_cards.db'}"


def cors_allow_origins() -> list[str]:
    raw = _env_str('CORS_ALLOW_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173')
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


LOG_DIR = Path(_env_str('BUSINESS_CARD_LOG_DIR', str(APP_DIR / 'logs')))
LOG_LEVEL = _env_str('BUSINESS_CARD_LOG_LEVEL', 'INFO').upper()

PHOTO_MAX_WIDTH = _env_int('PHOTO_MAX_WIDTH', 300)
PHOTO_MAX_HEIGHT = _env_int('PHOTO_MAX_HEIGHT', 300)
PHOTO_JPEG_QUALITY = _env_int('PHOTO_JPEG_QUALITY', 85)
