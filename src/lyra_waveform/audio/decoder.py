"""Codec-specific decoding into interleaved float32 sample blocks."""

from __future__ import annotations

from dataclasses import dataclass

import av
import numpy as np
from av.codec import Codec
from av.error import FFmpegError
from loguru import logger

from ..errors import UnsupportedCodecError
from ..models.audio import TrackParameters


@dataclass(frozen=True)
class DecodedFrameBlock:
    """Interleaved samples from one decoded frame.

    Only valid for the packet-loop iteration that produced it.
    """

    samples: np.ndarray
    channels: int


class Decoder:
    """Wraps a stream's codec context and converts output to packed float."""

    def __init__(self, codec_context, params: TrackParameters) -> None:
        self._ctx = codec_context
        self.params = params
        # Packed float keeps channel samples interleaved; layout and rate
        # follow the input frame.
        self._resampler = av.AudioResampler(format="flt")

    def _blocks(self, frames) -> list[DecodedFrameBlock]:
        blocks = []
        for frame in frames:
            arr = frame.to_ndarray()
            if arr is None or arr.size == 0:
                continue
            channels = len(frame.layout.channels) or self.params.channels
            blocks.append(
                DecodedFrameBlock(
                    samples=arr.reshape(-1).astype(np.float32, copy=False),
                    channels=channels,
                )
            )
        return blocks

    def decode(self, packet) -> list[DecodedFrameBlock]:
        """Decode one packet.

        Raises ``FFmpegError`` or ``ValueError`` when the packet is corrupt.
        """
        out = []
        for frame in self._ctx.decode(packet):
            out.extend(self._resampler.resample(frame))
        return self._blocks(out)

    def flush(self) -> list[DecodedFrameBlock]:
        """Drain samples still buffered in the sample-format converter."""
        try:
            return self._blocks(self._resampler.resample(None))
        except (FFmpegError, ValueError) as exc:
            logger.warning(f"Resampler flush failed: {exc}")
            return []


def open_decoder(stream, params: TrackParameters) -> Decoder:
    """Instantiate the decoder registered for ``params.codec``."""
    try:
        codec = Codec(params.codec, "r")
    except (ValueError, FFmpegError) as exc:
        raise UnsupportedCodecError(f"Failed to create decoder: {exc}") from exc
    if stream.codec_context is None:
        raise UnsupportedCodecError(
            f"Failed to create decoder: no decoder for codec '{params.codec}'"
        )
    logger.debug(f"Using decoder '{codec.name}' ({codec.long_name})")
    return Decoder(stream.codec_context, params)
