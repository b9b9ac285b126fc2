"""Binary ``.lf`` envelope for compressed JSON project data.

Layout::

    [b"LYRA"][version: u8][flags: u8, reserved][compressed UTF-8 JSON]

The desktop build writes a gzip payload, the web build a zlib one; both
are accepted on decode.
"""

from __future__ import annotations

import gzip
import zlib

from ..errors import LfFormatError

MAGIC_HEADER = b"LYRA"
FORMAT_VERSION = 1
HEADER_SIZE = len(MAGIC_HEADER) + 2

_GZIP_MAGIC = b"\x1f\x8b"


def encode_lf_format(data: str) -> bytes:
    """Wrap the JSON text *data* in an ``.lf`` envelope."""
    compressed = gzip.compress(data.encode("utf-8"))
    return MAGIC_HEADER + bytes([FORMAT_VERSION, 0]) + compressed


def decode_lf_format(buffer: bytes) -> str:
    """Return the JSON text stored in an ``.lf`` envelope.

    Raises :class:`LfFormatError` on a short buffer, a bad magic header,
    an unsupported version or a corrupt payload.
    """
    buffer = bytes(buffer)
    if len(buffer) < HEADER_SIZE:
        raise LfFormatError("Invalid .lf file: too short")
    if buffer[:4] != MAGIC_HEADER:
        raise LfFormatError("Invalid .lf file: missing LYRA header")
    version = buffer[4]
    if version > FORMAT_VERSION:
        raise LfFormatError(f"Unsupported .lf format version: {version}")

    payload = buffer[HEADER_SIZE:]
    try:
        if payload.startswith(_GZIP_MAGIC):
            raw = gzip.decompress(payload)
        else:
            raw = zlib.decompress(payload)
    except (OSError, EOFError, zlib.error) as exc:
        raise LfFormatError(f"Failed to decompress data: {exc}") from exc

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise LfFormatError(f"Invalid UTF-8 data: {exc}") from exc


def is_valid_lf_file(buffer: bytes) -> bool:
    """Cheap check: long enough and starts with the ``LYRA`` magic."""
    return len(buffer) >= HEADER_SIZE and bytes(buffer[:4]) == MAGIC_HEADER
