"""Project file envelope and on-disk locations."""

from .project_file import (
    FORMAT_VERSION,
    MAGIC_HEADER,
    decode_lf_format,
    encode_lf_format,
    is_valid_lf_file,
)

__all__ = [
    "FORMAT_VERSION",
    "MAGIC_HEADER",
    "decode_lf_format",
    "encode_lf_format",
    "is_valid_lf_file",
]
