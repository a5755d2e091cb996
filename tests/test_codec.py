# codec tests
import pytest

from DataString.encoding import (
    mask_bytes,
    unmask_bytes,
    remask_bytes,
    bytes_to_text,
    render_display,
    InvalidReconstructionError,
    SUBSTITUTE,
)


def test_mask_replaces_high_bytes_only() -> None:
  masked, table = mask_bytes(b"a\x80b\xffc\x80")
  assert masked == b"a\x1ab\x1ac\x1a"
  assert table == {0x80: [1, 5], 0xFF: [3]}


def test_mask_keeps_literal_sentinel_unrecorded() -> None:
  masked, table = mask_bytes(b"\x1a\xc8\x1a")
  assert masked == b"\x1a\x1a\x1a"
  assert table == {200: [1]}
  assert unmask_bytes(masked, table) == b"\x1a\xc8\x1a"


def test_mask_accepts_int_iterables() -> None:
  masked, table = mask_bytes([104, 105, 250])
  assert masked == b"hi\x1a"
  assert table == {250: [2]}


def test_mask_empty_input() -> None:
  assert mask_bytes(b"") == (b"", {})


def test_mask_custom_sentinel() -> None:
  masked, table = mask_bytes(b"\x90x", sentinel=ord("?"))
  assert masked == b"?x"
  assert unmask_bytes(masked, table) == b"\x90x"


def test_remask_overwrites_recorded_offsets() -> None:
  table = {200: [0, 2]}
  assert remask_bytes(b"\x01b\x7f", table) == bytes([SUBSTITUTE, ord("b"), SUBSTITUTE])


def test_unmask_out_of_range_offset_is_fatal() -> None:
  with pytest.raises(InvalidReconstructionError) as info:
    unmask_bytes(b"ab", {200: [0, 5]})
  assert info.value.offset == 5


def test_bytes_to_text_rejects_high_bytes() -> None:
  assert bytes_to_text(b"plain\x1a") == "plain\x1a"
  with pytest.raises(InvalidReconstructionError) as info:
    bytes_to_text(b"ab\xc8")
  assert info.value.offset == 2


def test_render_display() -> None:
  assert render_display("x\x1ay\x1a") == "x�y�"
  assert render_display("") == ""
  assert render_display("a?b", sentinel=ord("?"), replacement="*") == "a*b"
