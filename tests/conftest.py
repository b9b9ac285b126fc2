"""Shared fixtures: synthesize real WAV files for end-to-end decoding."""
import wave

import numpy as np
import pytest


def _write_wav(path, frames, sample_rate=44100):
    """Write float samples shaped (frames, channels) as 16-bit PCM."""
    frames = np.asarray(frames, dtype=np.float64)
    if frames.ndim == 1:
        frames = frames.reshape(-1, 1)
    pcm = np.clip(np.round(frames * 32767.0), -32768, 32767).astype("<i2")
    with wave.open(str(path), "wb") as wf:
        wf.setnchannels(frames.shape[1])
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(pcm.tobytes())
    return path


@pytest.fixture
def write_wav(tmp_path):
    """Factory: ``write_wav(name, frames, sample_rate=44100) -> Path``."""
    def factory(name, frames, sample_rate=44100):
        return _write_wav(tmp_path / name, frames, sample_rate)
    return factory


@pytest.fixture
def silent_stereo_wav(write_wav):
    """10 seconds of 44.1 kHz stereo silence."""
    return write_wav("silence.wav", np.zeros((441000, 2)))


@pytest.fixture
def sine_stereo_wav(write_wav):
    """2 seconds of a 440 Hz tone at half scale on the left channel only."""
    sr = 44100
    t = np.arange(sr * 2) / sr
    left = 0.5 * np.sin(2 * np.pi * 440 * t)
    right = np.zeros_like(left)
    return write_wav("tone.wav", np.column_stack([left, right]), sr)


@pytest.fixture
def garbage_file(tmp_path):
    """A file with no recognizable container signature."""
    path = tmp_path / "broken.xyz"
    path.write_bytes(b"not-an-audio-container " * 200)
    return path
