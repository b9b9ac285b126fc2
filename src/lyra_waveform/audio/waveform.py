"""Blocking waveform and metadata pipelines.

Both operations share the same front end (open, probe, select track) so
they always agree on duration, sample rate and channel count. Only
:func:`extract_waveform` decodes audio.
"""

from __future__ import annotations

import functools
from pathlib import Path

from loguru import logger

from ..errors import WaveformError
from ..models.audio import AudioInfoResult, TrackParameters, WaveformResult
from .amplitude import AmplitudeSeries
from .decoder import open_decoder
from .downsample import downsample
from .packet_loop import run_packet_loop
from .probe import probe_container
from .source import open_source
from .tracks import select_track


def _pipeline_errors(func):
    """Re-raise unexpected pipeline failures as :class:`WaveformError`.

    Keeps them apart from worker-dispatch failures at the async boundary.
    """

    @functools.wraps(func)
    def wrapper(path, *args):
        try:
            return func(path, *args)
        except WaveformError:
            raise
        except Exception as exc:
            logger.exception(f"Unexpected failure processing {path}")
            raise WaveformError(f"Failed to process audio file: {exc}") from exc

    return wrapper


@_pipeline_errors
def read_track_parameters(path: str | Path) -> TrackParameters:
    """Probe *path* and return the default audio track's parameters."""
    with open_source(path) as handle:
        with probe_container(handle) as container:
            _, params = select_track(container)
    return params


@_pipeline_errors
def read_audio_info(path: str | Path) -> AudioInfoResult:
    """Return duration, sample rate, channels and codec without decoding."""
    return AudioInfoResult.from_track(read_track_parameters(path))


@_pipeline_errors
def extract_waveform(path: str | Path, target: int) -> WaveformResult:
    """Decode *path* and summarize it as *target* peak/valley buckets."""
    if target < 0:
        raise WaveformError(f"Requested sample count must be >= 0, got {target}")

    with open_source(path) as handle:
        with probe_container(handle) as container:
            stream, params = select_track(container)
            decoder = open_decoder(stream, params)
            series = AmplitudeSeries()
            report = run_packet_loop(container, decoder, params.track_id, series)

    amplitudes = series.freeze()
    logger.info(
        f"Decoded {len(amplitudes)} frames from {path} "
        f"({report.packets_decoded} packets, {report.decode_errors} corrupt, "
        f"stopped on {report.stop_reason})"
    )
    if report.partial:
        logger.warning(f"Waveform for {path} is partial: {report.last_error}")

    if len(amplitudes) == 0:
        return WaveformResult.empty(params)

    peaks, valleys = downsample(amplitudes, target)
    return WaveformResult(
        sample_count=len(peaks),
        peaks=peaks,
        valleys=valleys,
        duration=params.duration,
        sample_rate=params.sample_rate,
        channels=params.channels,
    )
