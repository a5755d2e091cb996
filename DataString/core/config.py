"""
Masking configuration for DataString.
"""

from dataclasses import dataclass

from DataString.encoding.constants import SUBSTITUTE, ASCII_MAX, REPLACEMENT_CHAR


@dataclass(frozen=True)
class DataStringConfig:
    """
    Configuration for masking and display rendering.

    The masking threshold itself is fixed: only bytes above 127 are masked.
    """

    sentinel: int = SUBSTITUTE
    replacement_char: str = REPLACEMENT_CHAR

    def __post_init__(self):
        if not 0 <= self.sentinel <= ASCII_MAX:
            raise ValueError(f"Sentinel must be a 7-bit byte, got {self.sentinel}.")
        if len(self.replacement_char) != 1:
            raise ValueError("Replacement must be a single character.")

    @property
    def sentinel_char(self) -> str:
        """Gets the sentinel as it appears in the text form."""
        return chr(self.sentinel)

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }
    
    @classmethod
    def from_dict(cls, d: dict) -> "DataStringConfig":
        """Creates a DataStringConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
