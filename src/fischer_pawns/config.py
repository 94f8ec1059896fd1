"""Centralized report configuration.

All settings are read from FISCHER_PAWNS_* environment variables (or a
.env.fischer file). Nothing is required; the defaults reproduce the
classic report: stats for 1-4 unprotected pawns, then every position
leaving three pawns unprotected drawn with Unicode chess glyphs.
"""

from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PawnCount = Annotated[int, Field(ge=0, le=8)]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FISCHER_PAWNS_",
        env_file=".env.fischer", env_file_encoding="utf-8",
    )

    # Report
    highlight: PawnCount = 3
    glyphs: Literal["unicode", "ascii"] = "unicode"
    stats_counts: list[PawnCount] = Field(default_factory=lambda: [1, 2, 3, 4])

    # Logging
    log_level: str = "WARNING"
