"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Only the environment is read: catr has no configuration files.
"""

from __future__ import annotations

import codecs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings.

    Why pydantic-settings:
    - Typed, validated values at the edge (env vars).
    - A single contract shared by the CLI and the line sources.
    """

    model_config = SettingsConfigDict(
        env_prefix="CATR_",
        extra="ignore",
        case_sensitive=False,
    )

    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Text encoding used to decode input lines.",
    )
    verbose: bool = Field(
        default=False,
        description="Emit debug logs on standard error.",
    )

    @field_validator("encoding")
    @classmethod
    def _line_oriented_codec(cls, value: str) -> str:
        # Lines are split on the raw b"\n" byte before decoding.
        try:
            info = codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        if not getattr(info, "_is_text_encoding", True):
            raise ValueError(f"not a text encoding: {value}")
        try:
            newline = "\n".encode(info.name)
        except (LookupError, UnicodeError) as exc:
            raise ValueError(f"unusable encoding: {value}") from exc
        if newline != b"\n":
            raise ValueError(f"encoding does not store newline as a single byte: {value}")
        return info.name
