"""
Byte masking and unmasking for DataString.

Handles conversion between raw bytes and printable-safe text.
"""

from DataString.encoding.codec import (
    mask_bytes,
    unmask_bytes,
    remask_bytes,
    bytes_to_text,
    text_to_bytes,
    render_display,
)
from DataString.encoding.constants import (
    SUBSTITUTE,
    ASCII_MAX,
    REPLACEMENT_CHAR,
)
from DataString.encoding.errors import InvalidReconstructionError

__all__ = [
    "mask_bytes",
    "unmask_bytes",
    "remask_bytes",
    "bytes_to_text",
    "text_to_bytes",
    "render_display",
    "SUBSTITUTE",
    "ASCII_MAX",
    "REPLACEMENT_CHAR",
    "InvalidReconstructionError",
]
