"""Environment configuration read by settings.py."""

from pathlib import Path
from typing import Literal
from urllib.parse import unquote

from django.core.exceptions import ImproperlyConfigured
from pydantic import AnyUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

POSTGRES_SCHEMES = ("postgres", "postgresql")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VENUES_", env_file=".env", extra="ignore")

    debug: bool = Field(default=False)
    secret_key: str = "django-insecure-venues-dev-key"
    allowed_hosts: list[str] = ["localhost", "127.0.0.1", "testserver"]
    database_url: AnyUrl | None = None
    store: Literal["django", "memory"] = "django"
    not_found_status: int = 500
    log_level: str = "INFO"

    @field_validator("database_url", mode="before")
    @classmethod
    def strip_jdbc_prefix(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            if value.startswith("jdbc:"):
                return value[len("jdbc:"):]
        return value

    @field_validator("not_found_status")
    @classmethod
    def check_not_found_status(cls, value: int) -> int:
        if value not in (404, 500):
            raise ValueError("not_found_status must be 404 or 500")
        return value


def database_config(url: AnyUrl | None, base_dir: Path) -> dict:
    """Build a Django DATABASES entry from a database URL.

    No URL means a local SQLite file. Postgres connections always require SSL.
    """
    if url is None:
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": base_dir / "db.sqlite3",
        }

    if url.scheme == "sqlite":
        name = (url.path or "/")[1:]
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": name or ":memory:",
        }

    if url.scheme in POSTGRES_SCHEMES:
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": unquote((url.path or "/")[1:]),
            "USER": unquote(url.username or ""),
            "PASSWORD": unquote(url.password or ""),
            "HOST": url.host or "",
            "PORT": str(url.port or ""),
            "OPTIONS": {"sslmode": "require"},
        }

    raise ImproperlyConfigured(f"Unsupported database URL scheme: {url.scheme}")
