# logger tests
import logging

import pytest

import DataString.utils.logging as ds_logging
from DataString import DataString
from DataString.utils import get_logger


@pytest.fixture
def fresh_logger(monkeypatch):
  named = logging.getLogger("DataString")
  level, handlers = named.level, list(named.handlers)
  monkeypatch.setattr(ds_logging, "_logger", None)
  named.setLevel(logging.NOTSET)
  for handler in handlers:
    named.removeHandler(handler)
  yield named
  for handler in list(named.handlers):
    named.removeHandler(handler)
  for handler in handlers:
    named.addHandler(handler)
  named.setLevel(level)


def test_default_level_is_warning(fresh_logger) -> None:
  get_logger()
  assert fresh_logger.level == logging.WARNING


def test_preset_level_survives_first_construction(fresh_logger, caplog) -> None:
  fresh_logger.setLevel(logging.DEBUG)
  value = DataString.from_bytes(b"\x80")
  assert fresh_logger.level == logging.DEBUG
  value.take_text()
  assert "from_bytes | accepted | masked: 1" in caplog.text
  assert "take_text | accepted" in caplog.text


def test_set_level(fresh_logger) -> None:
  get_logger().set_level(logging.ERROR)
  assert fresh_logger.level == logging.ERROR


class _Unformattable:
  def __str__(self) -> str:
    raise AssertionError("formatted while DEBUG is off")

  __repr__ = __str__


def test_transfer_is_lazy_when_debug_off(fresh_logger) -> None:
  fresh_logger.setLevel(logging.WARNING)
  get_logger().transfer("take_text", accepted=True, field=_Unformattable())
