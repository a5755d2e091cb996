"""
DataString - Reversible text form for binary data

Carries "mostly textual" bytes through string-oriented APIs by masking every
byte above the 7-bit range with a sentinel and recording where it came from,
so the original bytes can always be rebuilt.
"""

from DataString.version import __version__

from DataString.interface.value import DataString

from DataString.core.config import DataStringConfig
from DataString.core.mask_table import MaskTable
from DataString.encoding.errors import InvalidReconstructionError

from DataString import core
from DataString import encoding

__all__ = [
    "__version__",
    "DataString",
    "DataStringConfig",
    "MaskTable",
    "InvalidReconstructionError",
    "core",
    "encoding",
]
