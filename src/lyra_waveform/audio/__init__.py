"""Audio probing, decoding and waveform reduction."""

from .amplitude import AmplitudeSeries, reduce_block
from .downsample import downsample
from .waveform import extract_waveform, read_audio_info, read_track_parameters

__all__ = [
    "AmplitudeSeries",
    "reduce_block",
    "downsample",
    "extract_waveform",
    "read_audio_info",
    "read_track_parameters",
]
