"""
Process configuration, resolved once at startup from environment variables.
"""
from __future__ import annotations

import logging
import os
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_PORT = 3000


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    server: Literal["uvicorn", "stdlib"] = "uvicorn"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    # Empty values count as unset, same as an absent variable.
    value = environ.get(name, "").strip()
    return value or None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from ``environ`` (defaults to ``os.environ`` plus .env)."""
    if environ is None:
        load_dotenv()
        environ = os.environ
    values = {
        "host": _env(environ, "HOST"),
        "port": _env(environ, "PORT"),
        "log_level": _env(environ, "LOG_LEVEL"),
        "server": _env(environ, "SERVER"),
    }
    return Settings(**{k: v for k, v in values.items() if v is not None})


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure root logging at ``level``."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    return logging.getLogger(__name__)
