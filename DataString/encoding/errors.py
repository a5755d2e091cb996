"""
Errors raised while rebuilding text from caller-supplied bytes.
"""

from typing import Optional


class InvalidReconstructionError(RuntimeError):
    """
    Raised when a buffer cannot be turned back into a valid text form.

    This is a caller error: the unchecked return path trusts that every
    offset outside the mask table still holds 7-bit data and that the
    buffer is long enough for every recorded offset.
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset
