import os
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Union

from .encoding import encode_name
from .errors import (
    AmbiguousError,
    ConflictError,
    DropError,
    NotFoundError,
    PartialFailureError,
    PermissionDeniedError,
    TransferError,
    UnrecognizedNameError,
)
from .models import DroppedEntry, UnrecognizedEntry
from .transfer import is_partial_name, move_path, remove_path
from Drop_Store.utils.logger import log

DEFAULT_STORE_ROOT = Path(tempfile.gettempdir()) / "dr"
DEFAULT_STORE_MODE = 0o700

SELECT_STRICT = "strict"
SELECT_LATEST = "latest"
SELECT_ALL = "all"
SELECT_POLICIES = (SELECT_STRICT, SELECT_LATEST, SELECT_ALL)

PathLike = Union[str, Path]


@contextmanager
def _os_errors(action: str, path):
    """
    Translate raw OSErrors into drop store errors.
    """
    try:
        yield
    except DropError:
        raise
    except FileNotFoundError as exc:
        raise NotFoundError(f"{action}: no such file: {path}") from exc
    except PermissionError as exc:
        raise PermissionDeniedError(f"{action}: permission denied: {path}") from exc
    except OSError as exc:
        raise TransferError(f"{action} {path}: {exc.strerror or exc}") from exc


def absolute_path(path: PathLike) -> Path:
    """
    Make `path` absolute without following a symlink in its last component.
    """
    path = Path(os.path.abspath(os.path.expanduser(str(path))))
    if path.parent == path:
        return path
    return path.parent.resolve() / path.name


class DropStore:
    """
    Holding directory for dropped files.

    The directory itself is the only state: every entry is a file (or
    directory) whose name encodes when it was dropped and where it came
    from. See Drop_Store.core.encoding for the name format.
    """

    def __init__(
        self,
        root: PathLike = DEFAULT_STORE_ROOT,
        *,
        clock: Callable[[], float] = time.time,
        mode: int = DEFAULT_STORE_MODE,
    ):
        self.root = absolute_path(root)
        self.clock = clock
        self.mode = mode

    # -------- Setup --------

    def ensure_root(self) -> Path:
        """
        Create the store directory with owner-only permissions if absent.
        """
        with _os_errors("Cannot create store", self.root):
            if not self.root.exists():
                self.root.mkdir(parents=True, mode=self.mode)
                # mkdir honours the umask, chmod does not
                os.chmod(self.root, self.mode)
                log("INFO", "store", f"Created store directory: {self.root}")

        if not self.root.is_dir():
            raise PermissionDeniedError(f"Store is not a directory: {self.root}")
        if not os.access(self.root, os.W_OK | os.X_OK):
            raise PermissionDeniedError(f"Store is not writable: {self.root}")

        return self.root

    # -------- Drop --------

    def drop_file(self, path: PathLike) -> DroppedEntry:
        """
        Move `path` into the store and return the new entry.
        """
        source = absolute_path(path)
        if not os.path.lexists(source):
            raise NotFoundError(f"File not found: {source}")

        if source == self.root or self.root in source.parents:
            raise PermissionDeniedError(f"Refusing to drop the store itself: {source}")
        if source in self.root.parents:
            raise PermissionDeniedError(f"Refusing to drop a parent of the store: {source}")

        self.ensure_root()
        timestamp = int(self.clock())

        with _os_errors("Failed to drop", source):
            target = self._free_name(timestamp, str(source))
            move_path(source, target)

        entry = DroppedEntry.from_stored_path(target)
        log("INFO", "store", f"Dropped: {source} -> {target}")
        return entry

    def _free_name(self, timestamp: int, original_path: str) -> Path:
        disambiguator = 0
        while True:
            target = self.root / encode_name(timestamp, original_path, disambiguator)
            if not os.path.lexists(target):
                return target
            disambiguator += 1

    # -------- Recover --------

    def recover_file(
        self,
        identifier: PathLike,
        select: str = SELECT_STRICT,
    ) -> List[DroppedEntry]:
        """
        Move matching entries back to their original paths.

        Never replaces an existing file. Every chosen entry is tried; an
        occupied destination ends in ConflictError, any other mix of
        failures in PartialFailureError. Both carry what was recovered.
        """
        chosen = self.select(identifier, select)

        recovered = []
        failures = []
        for entry in chosen:
            try:
                self.recover_entry(entry)
            except DropError as exc:
                failures.append((entry, exc))
                continue
            recovered.append(entry)

        if not failures:
            return recovered
        if len(chosen) == 1:
            raise failures[0][1]
        if all(isinstance(exc, ConflictError) for _entry, exc in failures):
            raise ConflictError([entry for entry, _exc in failures], recovered)
        raise PartialFailureError("recover", recovered, failures)

    def recover_entry(self, entry: DroppedEntry) -> Path:
        destination = Path(entry.original_path)
        if os.path.lexists(destination):
            raise ConflictError([entry])

        with _os_errors("Failed to recover", destination):
            destination.parent.mkdir(parents=True, exist_ok=True)
            try:
                move_path(entry.stored_path, destination)
            except FileExistsError as exc:
                raise ConflictError([entry]) from exc

        log("INFO", "store", f"Recovered: {entry.stored_path} -> {destination}")
        return destination

    # -------- Delete --------

    def delete_file(
        self,
        identifier: PathLike,
        select: str = SELECT_STRICT,
    ) -> List[DroppedEntry]:
        """
        Permanently remove matching entries from the store.

        A failing entry does not stop the others; PartialFailureError
        then reports what was deleted.
        """
        chosen = self.select(identifier, select)

        deleted = []
        failures = []
        for entry in chosen:
            try:
                self.delete_entry(entry)
            except DropError as exc:
                failures.append((entry, exc))
                continue
            deleted.append(entry)

        if not failures:
            return deleted
        if len(chosen) == 1:
            raise failures[0][1]
        raise PartialFailureError("delete", deleted, failures)

    def delete_entry(self, entry: DroppedEntry):
        with _os_errors("Failed to delete", entry.stored_path):
            remove_path(entry.stored_path)
        log("INFO", "store", f"Permanently deleted: {entry.stored_path}")

    # -------- Listing --------

    def list_entries(
        self,
        include_unrecognized: bool = True,
    ) -> Iterator[Union[DroppedEntry, UnrecognizedEntry]]:
        """
        Yield the store contents.

        Decoded entries come first, oldest first, ordered by
        (timestamp, disambiguator, original path). Names that do not
        decode follow, sorted by name. Each call scans the directory again.
        """
        if not self.root.is_dir():
            return

        entries = []
        unrecognized = []

        with _os_errors("Cannot read store", self.root):
            children = list(os.scandir(self.root))

        for child in children:
            if is_partial_name(child.name):
                continue
            stored_path = Path(child.path)
            try:
                entries.append(DroppedEntry.from_stored_path(stored_path))
            except UnrecognizedNameError as exc:
                log("DEBUG", "store", f"Unrecognized store entry {child.name!r}: {exc}")
                unrecognized.append(
                    UnrecognizedEntry(name=child.name, stored_path=stored_path, reason=str(exc))
                )

        entries.sort(key=lambda e: e.sort_key)
        yield from entries

        if include_unrecognized:
            unrecognized.sort(key=lambda u: u.name)
            yield from unrecognized

    def entries(self) -> List[DroppedEntry]:
        return list(self.list_entries(include_unrecognized=False))

    # -------- Matching --------

    def match(self, identifier: PathLike) -> List[DroppedEntry]:
        """
        Find the entries `identifier` refers to, oldest first.

        Tried in order, the first rule with hits wins:
        - an exact store filename
        - the original path (relative paths are taken from the cwd)
        - a fragment of the store filename or original path
        """
        ident = str(identifier)
        if not ident:
            return []

        entries = self.entries()

        hits = [e for e in entries if e.name == ident]
        if hits:
            return hits

        wanted = str(absolute_path(ident))
        hits = [e for e in entries if e.original_path in (wanted, ident)]
        if hits:
            return hits

        return [e for e in entries if ident in e.name or ident in e.original_path]

    def select(
        self,
        identifier: PathLike,
        select: str = SELECT_STRICT,
    ) -> List[DroppedEntry]:
        """
        Apply a disambiguation policy to match().

        strict: more than one hit is an AmbiguousError
        latest: the most recently dropped hit
        all:    every hit, oldest first
        """
        if select not in SELECT_POLICIES:
            raise ValueError(f"Unknown select policy: {select!r}")

        hits = self.match(identifier)
        if not hits:
            raise NotFoundError(f"No dropped entry matches: {identifier}")

        if len(hits) == 1 or select == SELECT_ALL:
            return hits
        if select == SELECT_LATEST:
            return [max(hits, key=lambda e: e.sort_key)]
        raise AmbiguousError(str(identifier), hits)

