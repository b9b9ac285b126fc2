"""Runtime settings.

Settings are read once from ``LYRA_WAVEFORM_*`` environment variables and
passed down explicitly; nothing here mutates after construction.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "LYRA_WAVEFORM_"


class WaveformSettings(BaseModel):
    """Immutable settings for the waveform service."""

    model_config = ConfigDict(frozen=True)

    # Bucket count used when the caller does not ask for one.
    default_samples: int = Field(default=200, ge=0)
    # Size of the worker pool that runs decoding off the caller's loop.
    max_workers: int = Field(default=4, ge=1)
    log_level: str = "INFO"
    log_file: Path | None = None

    @staticmethod
    def load_from_env() -> "WaveformSettings":
        """Build settings from the environment.

        Raises:
            pydantic.ValidationError if a variable holds an invalid value.
        """
        values = {}
        for name in ("default_samples", "max_workers", "log_level", "log_file"):
            raw = os.environ.get(ENV_PREFIX + name.upper())
            if raw:
                values[name] = raw
        return WaveformSettings.model_validate(values)
