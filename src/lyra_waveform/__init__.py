"""lyra-waveform: timeline waveform extraction for audio files."""

from .commands import generate_waveform, get_audio_info
from .errors import (
    DispatchError,
    MissingSampleRateError,
    NoTrackError,
    OpenError,
    ProbeError,
    UnsupportedCodecError,
    WaveformError,
)
from .models import AudioInfoResult, TrackParameters, WaveformResult

__version__ = "0.1.0"

__all__ = [
    "generate_waveform",
    "get_audio_info",
    "AudioInfoResult",
    "TrackParameters",
    "WaveformResult",
    "WaveformError",
    "OpenError",
    "ProbeError",
    "NoTrackError",
    "MissingSampleRateError",
    "UnsupportedCodecError",
    "DispatchError",
]
