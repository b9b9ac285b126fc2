"""Exception hierarchy for the waveform extraction pipeline.

Every failure that aborts an operation derives from :class:`WaveformError`
and carries a human-readable message suitable for returning to the host
application verbatim.
"""

from __future__ import annotations


class WaveformError(Exception):
    """Base class for failures that abort a waveform or info request."""


class OpenError(WaveformError):
    """Raised when the audio file is missing or cannot be read."""


class ProbeError(WaveformError):
    """Raised when no demuxer recognizes the file's content."""


class NoTrackError(WaveformError):
    """Raised when the container holds no audio track."""


class MissingSampleRateError(WaveformError):
    """Raised when the selected track does not declare a sample rate."""


class UnsupportedCodecError(WaveformError):
    """Raised when no decoder is registered for the track's codec."""


class DispatchError(WaveformError):
    """Raised when a request could not be run on the worker pool."""


class PacketReadError(Exception):
    """A non end-of-stream failure while pulling the next packet.

    Only raised inside the packet loop, which recovers from it by stopping
    early with the data decoded so far.
    """


class LfFormatError(ValueError):
    """Raised when a ``.lf`` project buffer cannot be decoded."""
