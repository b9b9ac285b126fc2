"""Default audio track selection and codec parameter extraction."""

from __future__ import annotations

from fractions import Fraction

from loguru import logger

from ..errors import MissingSampleRateError, NoTrackError, UnsupportedCodecError
from ..models.audio import DEFAULT_CHANNELS, TrackParameters
from .probe import DemuxedContainer


def _frame_count(
    stream,
    container: DemuxedContainer,
    time_base: Fraction | None,
    sample_rate: int,
) -> int:
    """Track length in *time_base* units (sample frames without one)."""
    if stream.duration:
        return int(stream.duration)
    # Some demuxers (raw ADTS, MP3 without a Xing header) only estimate
    # the container duration, in microseconds.
    if container.duration_us:
        seconds = Fraction(container.duration_us, 1_000_000)
        units = seconds / time_base if time_base else seconds * sample_rate
        return int(units)
    return 0


def select_track(container: DemuxedContainer):
    """Return ``(stream, TrackParameters)`` for the default audio track."""
    stream = container.default_track()
    if stream is None:
        raise NoTrackError("No audio track found")

    ctx = stream.codec_context
    if ctx is None:
        # PyAV leaves the codec context unset when FFmpeg has no decoder.
        raise UnsupportedCodecError(
            f"Failed to create decoder: no decoder available for track {stream.index}"
        )

    sample_rate = ctx.sample_rate
    if not sample_rate:
        raise MissingSampleRateError("Unknown sample rate")

    channels = ctx.channels or DEFAULT_CHANNELS
    time_base = stream.time_base
    params = TrackParameters(
        track_id=stream.index,
        sample_rate=sample_rate,
        channels=channels,
        time_base=time_base,
        n_frames=_frame_count(stream, container, time_base, sample_rate),
        codec=ctx.name,
    )
    logger.debug(
        f"Selected track {params.track_id}: {params.codec}, "
        f"{params.sample_rate} Hz, {params.channels} ch, {params.duration:.3f}s"
    )
    return stream, params
