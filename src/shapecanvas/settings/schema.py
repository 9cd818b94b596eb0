"""Pydantic model for user settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Defaults persisted to disk.

    Parameters
    ----------
    width: Surface width used when neither the scene nor the command line
        gives one.
    height: Surface height, same precedence as ``width``.
    output: Snapshot destination; ``.ppm`` is appended when missing.
    log_level: Standard logging level name for the command line front end.
    """

    width: int = Field(default=64, gt=0)
    height: int = Field(default=64, gt=0)
    output: str = Field(default="snapshot")
    log_level: str = Field(default="WARNING")

    @field_validator("output")
    @classmethod
    def _chk_output(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("output must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def _chk_level(cls, v: str) -> str:
        v = str(v).strip().upper()
        if v not in _LEVELS:
            raise ValueError("invalid log level: must be one of " + ", ".join(_LEVELS))
        return v
