"""
Ownership state of a DataString's text form.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Empty:
    """The text form is loaned out and has not been returned."""


@dataclass(frozen=True)
class Holding:
    """The value holds the canonical text form."""

    text: str


OwnershipState = Union[Empty, Holding]
