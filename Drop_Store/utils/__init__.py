# Auto-generated __init__.py

from . import logger
from .logger import get_logger
from .logger import log
from .logger import setup_logging

__all__ = [
    "logger",
    "get_logger",
    "log",
    "setup_logging",
]
