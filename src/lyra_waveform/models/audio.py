"""Pydantic v2 models for track parameters and waveform/info results."""

from __future__ import annotations

from fractions import Fraction

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

U8_MAX = 2**8 - 1
U32_MAX = 2**32 - 1

DEFAULT_CHANNELS = 2


class TrackParameters(BaseModel):
    """Codec parameters of the selected audio track.

    *n_frames* is the track length expressed in *time_base* units when a
    time base is known, otherwise in sample frames.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    track_id: int = 0
    sample_rate: int = Field(gt=0, le=U32_MAX)
    channels: int = Field(default=DEFAULT_CHANNELS, ge=1, le=U8_MAX)
    time_base: Fraction | None = None
    n_frames: int = Field(default=0, ge=0)
    codec: str

    @property
    def duration(self) -> float:
        """Track length in seconds."""
        if self.time_base is not None:
            return (
                self.n_frames
                * self.time_base.numerator
                / self.time_base.denominator
            )
        return self.n_frames / self.sample_rate


class WaveformResult(BaseModel):
    """Fixed-resolution, symmetric peak/valley summary of an audio file.

    Serialize with ``model_dump(by_alias=True)`` to get the camelCase keys
    the timeline expects (``sampleCount``, ``sampleRate``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sample_count: int = Field(ge=0)
    peaks: list[float] = []
    valleys: list[float] = []
    duration: float
    sample_rate: int = Field(ge=0, le=U32_MAX)
    channels: int = Field(ge=0, le=U8_MAX)

    @model_validator(mode="after")
    def _check_symmetry(self) -> "WaveformResult":
        if not (len(self.peaks) == len(self.valleys) == self.sample_count):
            raise ValueError(
                f"peaks ({len(self.peaks)}), valleys ({len(self.valleys)}) "
                f"and sampleCount ({self.sample_count}) must agree"
            )
        for peak, valley in zip(self.peaks, self.valleys):
            if not 0.0 <= peak <= 1.0:
                raise ValueError(f"peak {peak} outside [0.0, 1.0]")
            if valley != -peak:
                raise ValueError(f"valley {valley} does not mirror peak {peak}")
        return self

    @classmethod
    def empty(cls, params: TrackParameters) -> "WaveformResult":
        """Result for a track that decoded to zero frames."""
        return cls(
            sample_count=0,
            duration=params.duration,
            sample_rate=params.sample_rate,
            channels=params.channels,
        )


class AudioInfoResult(BaseModel):
    """Metadata-only description of an audio file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    duration: float
    sample_rate: int = Field(ge=0, le=U32_MAX)
    channels: int = Field(ge=0, le=U8_MAX)
    codec: str

    @classmethod
    def from_track(cls, params: TrackParameters) -> "AudioInfoResult":
        return cls(
            duration=params.duration,
            sample_rate=params.sample_rate,
            channels=params.channels,
            codec=params.codec,
        )
