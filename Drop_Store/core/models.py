from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .encoding import decode_name


@dataclass(frozen=True)
class DroppedEntry:
    """
    A file held in the store.

    Nothing is persisted besides the store filename itself; every field
    here is recovered from `stored_path.name`.
    """
    timestamp: int
    original_path: str
    stored_path: Path
    disambiguator: int = 0
    is_dir: bool = False

    @property
    def name(self) -> str:
        return self.stored_path.name

    @property
    def dropped_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp)

    @property
    def sort_key(self):
        return (self.timestamp, self.disambiguator, self.original_path)

    @classmethod
    def from_stored_path(cls, stored_path: Path) -> "DroppedEntry":
        timestamp, original_path, disambiguator = decode_name(stored_path.name)
        return cls(
            timestamp=timestamp,
            original_path=original_path,
            stored_path=stored_path,
            disambiguator=disambiguator,
            is_dir=stored_path.is_dir() and not stored_path.is_symlink(),
        )


@dataclass(frozen=True)
class UnrecognizedEntry:
    """
    A store filename that does not decode. Listed, never acted on.
    """
    name: str
    stored_path: Path
    reason: str

