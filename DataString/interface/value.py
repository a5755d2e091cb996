"""
DataString main value interface.
"""

from typing import Optional

from DataString.core.config import DataStringConfig
from DataString.core.mask_table import MaskTable
from DataString.core.state import Empty, Holding, OwnershipState
from DataString.encoding.codec import BytesLike, bytes_to_text, text_to_bytes, render_display
from DataString.encoding.errors import InvalidReconstructionError
from DataString.utils.logging import get_logger


class DataString:
    """
    Reversible text form of an arbitrary byte sequence.

    Every byte above 127 is replaced by a sentinel (0x1A by default) and its
    offset recorded in a mask table, so the held text is always valid ASCII
    and the original bytes can be rebuilt on demand.

    Only one view of the data is live at a time. Taking a view moves it out
    of the value; returning one moves it back in. Taking from an empty value
    gives None, and returning to a full value hands the argument back
    unconsumed.
    
    Usage:
        value = DataString.from_bytes(b"header: \\xff\\x00\\x80")
        
        # Display and read-only views
        print(value)
        raw = value.as_bytes()
        
        # Loan the text out and give it back
        text = value.take_text()
        value.return_text(text)
        
        # Rebuild the original bytes
        data = value.take_bytes()
        value.return_bytes_unchecked(data)

    Not safe for concurrent use without external locking.
    """

    def __init__(
        self,
        data: BytesLike = b"",
        config: Optional[DataStringConfig] = None,
    ):
        self.config = config or DataStringConfig()
        self._logger = get_logger()

        self._table, masked = MaskTable.build(data, self.config.sentinel)
        self._state: OwnershipState = Holding(bytes_to_text(masked))

        self._logger.transfer(
            "from_bytes", accepted=True, masked=len(self._table), length=len(masked)
        )
    
    @classmethod
    def from_bytes(
        cls,
        data: BytesLike,
        config: Optional[DataStringConfig] = None,
    ) -> "DataString":
        """
        Creates a DataString from raw bytes.
        
        Args:
            data: Bytes-like object or iterable of ints in 0..255
            config: Masking configuration
        
        Returns:
            DataString holding the masked text form
        """
        return cls(data, config)
    
    @property
    def mask_table(self) -> MaskTable:
        """Gets the table of masked offsets."""
        return self._table
    
    @property
    def holds_text(self) -> bool:
        """Checks whether the value currently holds its text form."""
        return isinstance(self._state, Holding)
    
    def take_text(self) -> Optional[str]:
        """
        Moves the text form out of the value.
        
        Returns:
            The held text, or None if it is already loaned out
        """
        state = self._state
        if not isinstance(state, Holding):
            self._logger.transfer("take_text", accepted=False)
            return None

        self._state = Empty()
        self._logger.transfer("take_text", accepted=True, length=len(state.text))
        return state.text
    
    def return_text(self, candidate: str) -> Optional[str]:
        """
        Moves a text form back into the value.
        
        The candidate is not checked against the original data, so an
        edited text becomes the new canonical form.
        
        Args:
            candidate: Text to store
        
        Returns:
            None if stored, otherwise the candidate unchanged
        """
        if isinstance(self._state, Holding):
            self._logger.transfer("return_text", accepted=False)
            return candidate

        self._state = Holding(candidate)
        self._logger.transfer("return_text", accepted=True, length=len(candidate))
        return None
    
    def take_bytes(self) -> Optional[bytes]:
        """
        Moves the data out of the value as the original bytes.
        
        Returns:
            Reconstructed bytes, or None if the text form is loaned out
        
        Raises:
            InvalidReconstructionError: if the held text is too short for a
                recorded offset; the value keeps its text in that case
        """
        state = self._state
        if not isinstance(state, Holding):
            self._logger.transfer("take_bytes", accepted=False)
            return None

        try:
            data = self._table.restore(text_to_bytes(state.text))
        except InvalidReconstructionError as e:
            self._logger.error(f"take_bytes failed: {e}")
            raise

        self._state = Empty()
        self._logger.transfer("take_bytes", accepted=True, length=len(data))
        return data
    
    def return_bytes_unchecked(self, candidate: BytesLike) -> Optional[BytesLike]:
        """
        Moves raw bytes back into the value, masking the recorded offsets.
        
        The caller must supply a buffer laid out like the original: every
        offset outside the mask table has to hold a 7-bit value. This is not
        checked before masking.
        
        Args:
            candidate: Bytes to store
        
        Returns:
            None if stored, otherwise the candidate unchanged
        
        Raises:
            InvalidReconstructionError: if the masked buffer is not valid text
        """
        if isinstance(self._state, Holding):
            self._logger.transfer("return_bytes_unchecked", accepted=False)
            return candidate

        try:
            text = bytes_to_text(self._table.remask(candidate, self.config.sentinel))
        except InvalidReconstructionError as e:
            self._logger.error(f"return_bytes_unchecked failed: {e}")
            raise

        self._state = Holding(text)
        self._logger.transfer("return_bytes_unchecked", accepted=True, length=len(text))
        return None
    
    def as_str(self) -> str:
        """Gets the held text form, or an empty string."""
        state = self._state
        return state.text if isinstance(state, Holding) else ""
    
    def as_bytes(self) -> bytes:
        """Gets the held text form as raw bytes, or empty bytes."""
        return text_to_bytes(self.as_str())
    
    def display(self) -> str:
        """Renders the held text with every sentinel shown as the replacement character."""
        return render_display(
            self.as_str(),
            self.config.sentinel,
            self.config.replacement_char,
        )
    
    def __str__(self) -> str:
        return self.display()
    
    def __bytes__(self) -> bytes:
        return self.as_bytes()
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataString):
            return NotImplemented
        return (
            self._state == other._state
            and self._table == other._table
            and self.config == other.config
        )
    
    __hash__ = None

    def __repr__(self) -> str:
        return f"DataString(state={self._state!r}, mask_table={self._table!r})"
