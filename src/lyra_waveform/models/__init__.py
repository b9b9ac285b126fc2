"""Re-export the pipeline's data models for convenient access."""

from lyra_waveform.models.audio import (
    AudioInfoResult,
    TrackParameters,
    WaveformResult,
)

__all__ = [
    "AudioInfoResult",
    "TrackParameters",
    "WaveformResult",
]
