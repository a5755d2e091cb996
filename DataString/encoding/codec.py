"""
Single-buffer masking and unmasking functions between raw bytes and printable-safe text.
"""

import numpy as np
from typing import Dict, Iterable, List, Tuple, Union

from DataString.encoding.constants import (
    SUBSTITUTE,
    ASCII_MAX,
    REPLACEMENT_CHAR,
    TEXT_ENCODING,
    RAW_ENCODING,
)
from DataString.encoding.errors import InvalidReconstructionError


BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def _to_array(data: BytesLike) -> np.ndarray:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data)
    return np.frombuffer(data, dtype=np.uint8).copy()


def _write_positions(buf: np.ndarray, positions: List[int], value: int) -> None:
    if not positions:
        return
    last = max(positions)
    if last >= buf.size:
        raise InvalidReconstructionError(
            f"Offset {last} is out of range for a buffer of {buf.size} bytes.",
            offset=last,
        )
    buf[positions] = value


def mask_bytes(
    data: BytesLike,
    sentinel: int = SUBSTITUTE,
) -> Tuple[bytes, Dict[int, List[int]]]:
    """
    Masks every byte above the 7-bit range with the sentinel.

    Literal sentinel bytes already present in the input are left as they are
    and are not recorded, so unmasking is driven by the table alone.

    Args:
        data: Input bytes (or an iterable of ints in 0..255)
        sentinel: Byte written in place of each masked value

    Returns:
        Tuple of (masked bytes, table of original value -> ascending offsets)
    """
    buf = _to_array(data)
    high = np.flatnonzero(buf > ASCII_MAX)

    table: Dict[int, List[int]] = {}
    for index, value in zip(high.tolist(), buf[high].tolist()):
        table.setdefault(value, []).append(index)

    buf[high] = sentinel
    return buf.tobytes(), table


def unmask_bytes(masked: BytesLike, table: Dict[int, List[int]]) -> bytes:
    """
    Writes every recorded original value back at its offsets.

    Args:
        masked: Masked bytes
        table: Table produced by mask_bytes

    Returns:
        Reconstructed original bytes
    """
    buf = _to_array(masked)
    for value, positions in table.items():
        _write_positions(buf, positions, value)
    return buf.tobytes()


def remask_bytes(
    data: BytesLike,
    table: Dict[int, List[int]],
    sentinel: int = SUBSTITUTE,
) -> bytes:
    """Overwrites every offset recorded in the table with the sentinel."""
    buf = _to_array(data)
    for positions in table.values():
        _write_positions(buf, positions, sentinel)
    return buf.tobytes()


def bytes_to_text(data: BytesLike) -> str:
    """
    Interprets a masked buffer as text.

    Raises:
        InvalidReconstructionError: if any byte is outside the 7-bit range
    """
    raw = bytes(data)
    try:
        return raw.decode(TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise InvalidReconstructionError(
            f"Byte 0x{raw[e.start]:02x} at offset {e.start} is outside the 7-bit range.",
            offset=e.start,
        ) from e


def text_to_bytes(text: str) -> bytes:
    """Gets the raw bytes of a text form."""
    return text.encode(RAW_ENCODING)


def render_display(
    text: str,
    sentinel: int = SUBSTITUTE,
    replacement: str = REPLACEMENT_CHAR,
) -> str:
    """Replaces every sentinel character with the display replacement."""
    return text.replace(chr(sentinel), replacement)
