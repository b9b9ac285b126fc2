"""Async boundary exposed to the host application.

``generate_waveform`` and ``get_audio_info`` hand the blocking pipeline to
a bounded thread pool and await the result, so decoding a long file never
blocks the caller's event loop. Failures come back as a descriptive string
rather than an exception.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, TypeVar

from loguru import logger

from .audio.waveform import extract_waveform, read_audio_info
from .config import WaveformSettings
from .errors import DispatchError, WaveformError
from .models.audio import AudioInfoResult, WaveformResult

T = TypeVar("T")


class WorkerPool:
    """Bounded pool of worker threads for blocking pipeline calls.

    Requests are independent; there is no cancellation and no timeout.
    Callers wanting bounded latency wrap the awaited call themselves.
    """

    def __init__(self, max_workers: int = 4) -> None:
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="lyra-waveform"
        )

    async def run(self, func: Callable[..., T], *args: Any) -> T:
        """Run ``func(*args)`` on a worker and await its result.

        Pipeline failures (:class:`WaveformError`) propagate unchanged;
        anything else, including a failed submission, is raised as
        :class:`DispatchError`.
        """
        loop = asyncio.get_running_loop()
        try:
            future = loop.run_in_executor(self._executor, func, *args)
        except RuntimeError as exc:
            raise DispatchError(f"Task failed: {exc}") from exc
        try:
            return await future
        except WaveformError:
            raise
        except Exception as exc:
            raise DispatchError(f"Task failed: {exc}") from exc

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


_default_pool: WorkerPool | None = None


def get_worker_pool() -> WorkerPool:
    """Return the process-wide pool, creating it from settings on first use."""
    global _default_pool
    if _default_pool is None:
        settings = WaveformSettings.load_from_env()
        _default_pool = WorkerPool(max_workers=settings.max_workers)
    return _default_pool


def shutdown_worker_pool(wait: bool = True) -> None:
    global _default_pool
    if _default_pool is not None:
        _default_pool.shutdown(wait=wait)
        _default_pool = None


async def generate_waveform(
    audio_path: str,
    samples: int,
    *,
    pool: WorkerPool | None = None,
) -> WaveformResult | str:
    """Summarize *audio_path* as *samples* peak/valley buckets."""
    pool = pool or get_worker_pool()
    try:
        return await pool.run(extract_waveform, audio_path, samples)
    except WaveformError as exc:
        logger.error(f"generate_waveform failed for {audio_path}: {exc}")
        return str(exc)


async def get_audio_info(
    audio_path: str,
    *,
    pool: WorkerPool | None = None,
) -> AudioInfoResult | str:
    """Return metadata for *audio_path* without decoding it."""
    pool = pool or get_worker_pool()
    try:
        return await pool.run(read_audio_info, audio_path)
    except WaveformError as exc:
        logger.error(f"get_audio_info failed for {audio_path}: {exc}")
        return str(exc)
