from functools import lru_cache
from pathlib import Path
from string import Formatter

from pydantic import field_validator
from pydantic_settings import BaseSettings

from records_api.domain.policies import DeletePolicy, UpdatePolicy

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
_WRITE_SUCCESS_STATUSES = frozenset({202, 204})
_URL_TEMPLATE_FIELDS = frozenset({"search", "term"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Records API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./records.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Record store policies
    record_update_policy: UpdatePolicy = UpdatePolicy.STRICT
    record_delete_policy: DeletePolicy = DeletePolicy.STRICT

    # Response mapping
    write_success_status: int = 202          # PUT / DELETE success, 202 or 204
    distinguish_conflict: bool = True        # False → duplicate id surfaces as 500

    # Remote volume lookups
    remote_url_template: str = "https://www.googleapis.com/books/v1/volumes?q={search}:{term}"
    remote_timeout: float = 10.0

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # record repository
    log_level_remote: str = "INFO"           # remote fetch client

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("write_success_status")
    @classmethod
    def _check_write_status(cls, value: int) -> int:
        if value not in _WRITE_SUCCESS_STATUSES:
            raise ValueError(f"write_success_status must be 202 or 204, got {value}")
        return value

    @field_validator("remote_url_template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        try:
            fields = {name for _, name, _, _ in Formatter().parse(value) if name is not None}
        except ValueError as exc:
            raise ValueError(f"remote_url_template is not a valid format string: {exc}") from exc
        if fields != _URL_TEMPLATE_FIELDS:
            raise ValueError(
                "remote_url_template must use exactly the {search} and {term} placeholders, "
                f"got {sorted(fields)}"
            )
        return value


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
