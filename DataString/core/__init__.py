"""
Core components for DataString.

This module contains the building blocks of a DataString value:
- Masking configuration (DataStringConfig)
- Ownership state (Empty, Holding)
- Masked offset table (MaskTable)
"""

from DataString.core.config import DataStringConfig
from DataString.core.state import Empty, Holding, OwnershipState
from DataString.core.mask_table import MaskTable

__all__ = [
    "DataStringConfig",
    "Empty",
    "Holding",
    "OwnershipState",
    "MaskTable",
]
