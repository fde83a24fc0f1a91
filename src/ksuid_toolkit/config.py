"""
Settings - defaults for the service façade and the CLI

Settings are a validated pydantic model. They come from keyword arguments in
library use, or from the environment via load_settings() in the CLI.

Environment variables:
    KSUID_COUNT      default number of ids to generate
    KSUID_FORMAT     default output format
    KSUID_TIMEZONE   IANA zone for time views (system local zone if unset)
    KSUID_LOG_LEVEL  logging level for stderr diagnostics
    ENVIRONMENT      "production" switches logs to JSON
"""

import os
from collections.abc import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from ksuid_toolkit.formatting import OutputFormat


class KsuidSettings(BaseModel):
    """Runtime settings"""

    default_count: int = Field(
        default=1,
        ge=1,
        description="Number of identifiers generated when none are given to parse",
    )

    default_format: OutputFormat = Field(
        default=OutputFormat.STRING,
        description="Output view used when none is requested",
    )

    timezone: str | None = Field(
        default=None,
        description="IANA zone for time-bearing views (None = system local zone)",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines instead of console-formatted ones",
    )

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(environ: Mapping[str, str] | None = None) -> KsuidSettings:
    """
    Build settings from environment variables

    Args:
        environ: Mapping to read from (os.environ if None)
    """
    env = os.environ if environ is None else environ

    values: dict[str, object] = {}
    if "KSUID_COUNT" in env:
        values["default_count"] = env["KSUID_COUNT"]
    if "KSUID_FORMAT" in env:
        values["default_format"] = env["KSUID_FORMAT"]
    if env.get("KSUID_TIMEZONE"):
        values["timezone"] = env["KSUID_TIMEZONE"]
    if "KSUID_LOG_LEVEL" in env:
        values["log_level"] = env["KSUID_LOG_LEVEL"]
    values["json_logs"] = env.get("ENVIRONMENT", "development").lower() == "production"

    return KsuidSettings(**values)
