# Auto-generated __init__.py

from . import dr
from .dr import load_settings
from .dr import main
from .dr import run

__all__ = [
    "dr",
    "load_settings",
    "main",
    "run",
]
