from DataString.utils.logging import get_logger, DataStringLogger

__all__ = [
    "get_logger",
    "DataStringLogger",
]
