"""Per-user locations for lyra-waveform.

Directories are created lazily by :func:`ensure_parents`, keeping imports
side-effect-free.
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "lyra-waveform"

LOG_DIR: Path = Path(user_log_dir(APP_NAME))
LOG_FILE_NAME = "lyra-waveform.log"


def default_log_file() -> Path:
    """Per-user log file used by ``lyra-waveform --log-to-file``."""
    return LOG_DIR / LOG_FILE_NAME


def ensure_parents(path: Path) -> Path:
    """Create all parent directories for *path* if they do not exist.

    Returns *path* unchanged so the call can be used inline.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
