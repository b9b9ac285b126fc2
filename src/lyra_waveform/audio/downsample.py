"""Fixed-bucket peak/valley downsampling."""

from __future__ import annotations

import numpy as np


def downsample(series: np.ndarray, target: int) -> tuple[list[float], list[float]]:
    """Bucket *series* into at most *target* peak/valley pairs.

    Bucket ``i`` covers ``[int(i * w), min(N, int((i + 1) * w)))`` with
    ``w = max(1.0, N / target)``. Boundaries are truncated, so bucket sizes
    may differ by one frame when ``N`` is not a multiple of *target*. When
    ``N < target`` fewer than *target* buckets are returned.
    """
    if target < 0:
        raise ValueError(f"target bucket count must be >= 0, got {target}")
    total = len(series)
    if total == 0 or target == 0:
        return [], []

    bucket_width = max(1.0, total / target)
    peaks: list[float] = []
    valleys: list[float] = []
    for i in range(target):
        start = int(i * bucket_width)
        if start >= total:
            break
        end = min(total, int((i + 1) * bucket_width))
        peak = float(np.float32(series[start:end].max(initial=0.0)))
        peaks.append(peak)
        valleys.append(-peak)
    return peaks, valleys
