"""Open audio files as seekable byte streams."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from loguru import logger

from ..errors import OpenError


@dataclass
class AudioStreamHandle:
    """An open, seekable binary stream plus an optional extension hint.

    The hint is the lower-case file extension without the dot, used only
    to bias format probing. The handle owns the stream and closes it on
    :meth:`close` or when leaving a ``with`` block.
    """

    path: Path
    stream: BinaryIO
    extension: str | None = None
    closed: bool = field(default=False, init=False)

    def close(self) -> None:
        if not self.closed:
            self.stream.close()
            self.closed = True

    def __enter__(self) -> "AudioStreamHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def extension_hint(path: str | Path) -> str | None:
    """Return the lower-case extension of *path* without the dot."""
    suffix = Path(path).suffix
    return suffix[1:].lower() if suffix else None


def open_source(path: str | Path) -> AudioStreamHandle:
    """Open *path* for reading.

    Raises :class:`OpenError` if the file is missing or unreadable.
    """
    path = Path(path)
    try:
        stream = path.open("rb")
    except OSError as exc:
        raise OpenError(f"Failed to open audio file: {exc}") from exc
    logger.debug(f"Opened audio source {path}")
    return AudioStreamHandle(path=path, stream=stream, extension=extension_hint(path))
