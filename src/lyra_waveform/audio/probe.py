"""Container probing on top of PyAV's demuxer registry.

Detection precedence is content first, extension second: libavformat
inspects the stream's signature, and only if that fails do we retry with
the demuxer the file extension suggests.
"""

from __future__ import annotations

from typing import Any

import av
from av.error import FFmpegError
from loguru import logger

from ..errors import PacketReadError, ProbeError
from .source import AudioStreamHandle

# Extension hint -> libavformat demuxer name.
EXTENSION_FORMATS: dict[str, str] = {
    "aac": "aac",
    "adts": "aac",
    "aif": "aiff",
    "aifc": "aiff",
    "aiff": "aiff",
    "caf": "caf",
    "flac": "flac",
    "m4a": "mov",
    "m4b": "mov",
    "mka": "matroska",
    "mkv": "matroska",
    "mov": "mov",
    "mp2": "mp3",
    "mp3": "mp3",
    "mp4": "mov",
    "oga": "ogg",
    "ogg": "ogg",
    "opus": "ogg",
    "wav": "wav",
    "wave": "wav",
    "webm": "matroska",
    "wv": "wv",
}


class DemuxedContainer:
    """A probed container exposing its default audio track and packets."""

    def __init__(self, container: Any, format_name: str) -> None:
        self._container = container
        self.format_name = format_name
        self._packets = None

    @property
    def duration_us(self) -> int | None:
        """Container-level duration in microseconds, if known."""
        return self._container.duration

    def default_track(self):
        """Return the container's designated audio stream, or ``None``."""
        return self._container.streams.best("audio")

    def next_packet(self):
        """Pull the next packet of any track.

        Returns ``None`` at end of stream and raises
        :class:`PacketReadError` for any other read failure.
        """
        if self._packets is None:
            self._packets = self._container.demux()
        try:
            return next(self._packets)
        except (StopIteration, EOFError):
            return None
        except (FFmpegError, OSError) as exc:
            raise PacketReadError(str(exc)) from exc

    def close(self) -> None:
        self._container.close()

    def __enter__(self) -> "DemuxedContainer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _open(stream, format_name: str | None):
    stream.seek(0)
    return av.open(stream, mode="r", format=format_name)


def probe_container(handle: AudioStreamHandle) -> DemuxedContainer:
    """Pick a demuxer for *handle* and open it.

    Raises :class:`ProbeError` when neither the content signature nor the
    extension hint yields a demuxer that accepts the stream.
    """
    try:
        container = _open(handle.stream, None)
    except (FFmpegError, OSError) as content_exc:
        fallback = EXTENSION_FORMATS.get(handle.extension or "")
        if fallback is None:
            raise ProbeError(
                f"Failed to probe audio format: {content_exc}"
            ) from content_exc
        logger.debug(
            f"Content probe failed for {handle.path} ({content_exc}); "
            f"retrying with '{fallback}' demuxer from extension"
        )
        try:
            container = _open(handle.stream, fallback)
        except (FFmpegError, OSError, ValueError) as hint_exc:
            raise ProbeError(
                f"Failed to probe audio format: {hint_exc}"
            ) from hint_exc
        # A forced demuxer can accept unrelated bytes and expose no streams.
        if not container.streams.audio:
            container.close()
            raise ProbeError(
                f"Failed to probe audio format: {content_exc}"
            ) from content_exc

    format_name = container.format.name
    logger.debug(f"Probed {handle.path} as '{format_name}'")
    return DemuxedContainer(container, format_name)
