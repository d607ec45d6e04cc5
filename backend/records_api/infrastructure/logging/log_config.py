"""Per-category log levels for the records service.

Each ``log_level_*`` setting governs a group of logger names, so SQL
statements or httpx chatter can be silenced without touching the rest.
"""

import logging

from records_api.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_store": ("records_api.infrastructure.database",),
    "log_level_remote": ("records_api.infrastructure.http",),
}


def parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = logging.getLevelName(raw.upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def category_levels(settings: Settings) -> dict[str, int]:
    """Logger name → numeric level for every configured category."""
    return {
        name: parse_level(getattr(settings, field))
        for field, names in _CATEGORIES.items()
        for name in names
    }


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and category levels. Called once from the app lifespan."""
    settings = settings or get_settings()
    # No-op when uvicorn (or pytest) already installed a root handler
    logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger().setLevel(parse_level(settings.log_level))

    for name, level in category_levels(settings).items():
        logging.getLogger(name).setLevel(level)
