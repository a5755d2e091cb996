"""
Mask table for DataString.
"""

import numpy as np
from typing import Dict, Iterator, List, Tuple

from DataString.encoding.codec import BytesLike, mask_bytes, unmask_bytes, remask_bytes
from DataString.encoding.constants import SUBSTITUTE


class MaskTable:
    """
    Records where each masked byte value occurred in the original data.

    Maps an original byte value (above 127) to the ascending offsets it
    occupied. Entries keep the order in which values were first seen.
    Built once from the original bytes and only read afterwards.
    """

    def __init__(self, entries: Dict[int, List[int]]):
        self._entries: Dict[int, List[int]] = {
            value: list(positions) for value, positions in entries.items()
        }
    
    @classmethod
    def build(cls, data: BytesLike, sentinel: int = SUBSTITUTE) -> Tuple["MaskTable", bytes]:
        """
        Masks data and records the masked offsets.
        
        Args:
            data: Original bytes
            sentinel: Byte written in place of each masked value
        
        Returns:
            Tuple of (table, masked bytes)
        """
        masked, entries = mask_bytes(data, sentinel)
        return cls(entries), masked
    
    def restore(self, masked: BytesLike) -> bytes:
        """Writes the original values back over a masked buffer."""
        return unmask_bytes(masked, self._entries)
    
    def remask(self, data: BytesLike, sentinel: int = SUBSTITUTE) -> bytes:
        """Writes the sentinel over every recorded offset."""
        return remask_bytes(data, self._entries, sentinel)
    
    def positions(self) -> np.ndarray:
        """Gets all recorded offsets in ascending order."""
        if not self._entries:
            return np.empty(0, dtype=np.int64)
        return np.sort(np.concatenate([
            np.asarray(positions, dtype=np.int64) for positions in self._entries.values()
        ]))
    
    def positions_for(self, value: int) -> List[int]:
        """Gets the offsets recorded for one original byte value."""
        return list(self._entries.get(value, []))
    
    def to_dict(self) -> Dict[int, List[int]]:
        """Gets a copy of the table as a plain dictionary."""
        return {value: list(positions) for value, positions in self._entries.items()}
    
    def __iter__(self) -> Iterator[Tuple[int, List[int]]]:
        for value, positions in self._entries.items():
            yield value, list(positions)
    
    def __contains__(self, value: int) -> bool:
        return value in self._entries
    
    def __len__(self) -> int:
        return sum(len(positions) for positions in self._entries.values())
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaskTable):
            return NotImplemented
        return self._entries == other._entries
    
    __hash__ = None

    def __repr__(self) -> str:
        return f"MaskTable({self._entries!r})"
