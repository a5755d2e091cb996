"""
DataString interface module.
"""

from DataString.interface.value import DataString

__all__ = [
    "DataString",
]
