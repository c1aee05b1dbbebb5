"""Converter configuration."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "TZCONVERT_"


class ConverterConfig(BaseModel):
    """
    Converter configuration.

    Zone defaults mirror what the form shows on first load: the user's own
    zone on the left (when it can be detected) and UTC on the right.
    """

    default_source_zone: str = Field(
        default="America/Toronto",
        description="Source zone when the local zone cannot be detected",
        min_length=1,
    )
    default_target_zone: str = Field(
        default="UTC",
        description="Target zone shown on first load",
        min_length=1,
    )
    detect_local_zone: bool = Field(
        default=True,
        description="Prefer the host's local zone as the default source zone",
    )
    max_search_results: int = Field(
        default=0,
        description="Cap on zone search results (0 = unlimited)",
        ge=0,
        le=5000,
    )


def load_config() -> ConverterConfig:
    """
    Build config from TZCONVERT_* environment variables.

    Values in a .env file are loaded first; real environment variables win.
    Unset variables keep their defaults.
    """
    load_dotenv()
    values = {}
    for name in ConverterConfig.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            values[name] = raw
    return ConverterConfig.model_validate(values)
