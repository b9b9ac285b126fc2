"""Per-frame absolute amplitude reduction."""

from __future__ import annotations

import numpy as np

from .decoder import DecodedFrameBlock


def reduce_block(samples: np.ndarray, channels: int) -> np.ndarray:
    """Reduce interleaved *samples* to one peak magnitude per frame.

    A trailing group shorter than *channels* is dropped.
    """
    channels = max(1, int(channels))
    flat = np.asarray(samples, dtype=np.float32).reshape(-1)
    whole = (len(flat) // channels) * channels
    if whole == 0:
        return np.zeros(0, dtype=np.float32)
    frames = np.abs(flat[:whole]).reshape(-1, channels).max(axis=1)
    np.nan_to_num(frames, copy=False, nan=0.0)
    # Clamp to full scale; lossy decoders can overshoot slightly.
    np.minimum(frames, 1.0, out=frames)
    return frames


class AmplitudeSeries:
    """Growing sequence of per-frame amplitudes in [0.0, 1.0].

    Blocks are reduced as they arrive, so only the scalar series is held in
    memory. Call :meth:`freeze` once decoding is done.
    """

    def __init__(self) -> None:
        self._chunks: list[np.ndarray] = []
        self._length = 0
        self._frozen: np.ndarray | None = None

    def __len__(self) -> int:
        return self._length

    def extend(self, block: DecodedFrameBlock) -> int:
        """Append the amplitudes of *block*; return the number of frames added."""
        if self._frozen is not None:
            raise RuntimeError("AmplitudeSeries is frozen")
        frames = reduce_block(block.samples, block.channels)
        if len(frames):
            self._chunks.append(frames)
            self._length += len(frames)
        return len(frames)

    def freeze(self) -> np.ndarray:
        """Return the complete series as a read-only float32 array."""
        if self._frozen is None:
            if self._chunks:
                series = np.concatenate(self._chunks)
            else:
                series = np.zeros(0, dtype=np.float32)
            series.setflags(write=False)
            self._frozen = series
            self._chunks = []
        return self._frozen
