"""
Configuration Management.

curlite reads no configuration file and no environment variables. All
runtime settings are defaults on typed Pydantic models, validated once and
cached for the life of the process.

Usage:
    from curlite.core.config import get_app_config

    config = get_app_config()
    config.json_indent
    config.logging.level
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict

from curlite import __version__


class _StrictBase(BaseModel):
    """Frozen base with extra='forbid' so unknown keys are caught immediately."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class LoggingConfig(_StrictBase):
    level: str = "WARNING"
    format: Literal["console", "json"] = "console"


class ClientConfig(_StrictBase):
    """Settings for one curlite invocation."""

    name: str = "curlite"
    version: str = __version__
    follow_redirects: bool = True
    json_indent: int = 2
    syntax_theme: str = "monokai"
    logging: LoggingConfig = LoggingConfig()


@lru_cache
def get_app_config() -> ClientConfig:
    """Get cached application configuration."""
    return ClientConfig()
