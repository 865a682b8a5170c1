import errno
import os
import shutil
from pathlib import Path
from typing import Dict, Tuple

from .errors import TransferError
from Drop_Store.utils.logger import log

PARTIAL_SUFFIX = ".partial"


def partial_path(dst: Path) -> Path:
    return dst.parent / f".{dst.name}{PARTIAL_SUFFIX}"


def is_partial_name(name: str) -> bool:
    return name.startswith(".") and name.endswith(PARTIAL_SUFFIX)


def move_path(src: Path, dst: Path) -> Path:
    """
    Move `src` to `dst`, never replacing an existing `dst`.

    A same-filesystem move is tried first (see _commit). When source and
    destination live on different filesystems the entry is copied next to
    `dst`, checked against the source, committed, and only then is the
    source removed.

    Raises FileExistsError if `dst` exists. OSErrors from the move
    propagate unchanged; failures in the copy fallback raise TransferError.
    """
    if os.path.lexists(dst):
        raise FileExistsError(errno.EEXIST, "File exists", str(dst))

    try:
        _commit(src, dst)
        return dst
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise

    log("INFO", "transfer", f"Cross-device move, copying: {src} -> {dst}")
    _copy_verify_move(src, dst)
    return dst


def _commit(src: Path, dst: Path):
    """
    Same-filesystem move that fails with FileExistsError instead of
    replacing `dst`.

    Files and symlinks are hard-linked to `dst` and then unlinked, so an
    existing `dst` is never touched. Directories are renamed: rename
    refuses a non-empty `dst` but still replaces an empty directory
    created after the caller's existence check.
    """
    if os.path.isdir(src) and not os.path.islink(src):
        os.rename(src, dst)
        return

    try:
        os.link(src, dst, follow_symlinks=False)
    except (NotImplementedError, OSError) as exc:
        # no hard links on this filesystem or platform
        if isinstance(exc, OSError) and exc.errno in (errno.EEXIST, errno.EXDEV, errno.ENOENT):
            raise
        if os.path.lexists(dst):
            raise FileExistsError(errno.EEXIST, "File exists", str(dst)) from exc
        os.rename(src, dst)
        return

    try:
        os.unlink(src)
    except OSError:
        os.unlink(dst)
        raise


# ----------------------------
# Cross-device fallback
# ----------------------------

def _copy_verify_move(src: Path, dst: Path):
    tmp = partial_path(dst)
    remove_path(tmp, missing_ok=True)

    try:
        _copy(src, tmp)
        _verify_copy(src, tmp)
    except (OSError, TransferError) as exc:
        remove_path(tmp, missing_ok=True)
        if isinstance(exc, TransferError):
            raise
        raise TransferError(f"Failed to copy {src}: {exc}") from exc

    if os.path.lexists(dst):
        remove_path(tmp, missing_ok=True)
        raise FileExistsError(errno.EEXIST, "File exists", str(dst))

    try:
        _commit(tmp, dst)
    except OSError as exc:
        remove_path(tmp, missing_ok=True)
        if isinstance(exc, FileExistsError):
            raise
        raise TransferError(f"Failed to commit copy of {src}: {exc}") from exc

    try:
        remove_path(src)
    except OSError as exc:
        # The source may be partly gone (directories); keep the copy then.
        if os.path.lexists(src) and _tree_signature(src) == _tree_signature(dst):
            remove_path(dst, missing_ok=True)
        raise TransferError(f"Failed to remove original {src}: {exc}") from exc


def _copy(src: Path, dst: Path):
    if src.is_symlink():
        os.symlink(os.readlink(src), dst)
    elif src.is_dir():
        shutil.copytree(src, dst, symlinks=True)
        for root, _dirs, files in os.walk(dst):
            for name in files:
                _fsync(Path(root) / name)
    else:
        shutil.copy2(src, dst)
        _fsync(dst)


def _fsync(path: Path):
    if path.is_symlink() or not path.is_file():
        return
    fd = os.open(path, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def _verify_copy(src: Path, dst: Path):
    if _tree_signature(src) != _tree_signature(dst):
        raise TransferError(f"Copy of {src} does not match the original")


def _tree_signature(path: Path) -> Dict[str, Tuple]:
    """
    Map each relative path under `path` to (kind, size or link target).
    """
    def describe(p: Path) -> Tuple:
        if p.is_symlink():
            return ("link", os.readlink(p))
        if p.is_dir():
            return ("dir", None)
        return ("file", p.stat().st_size)

    signature = {".": describe(path)}
    if path.is_dir() and not path.is_symlink():
        for root, dirs, files in os.walk(path):
            for name in dirs + files:
                child = Path(root) / name
                signature[str(child.relative_to(path))] = describe(child)
    return signature


def remove_path(path: Path, missing_ok: bool = False):
    if missing_ok and not os.path.lexists(path):
        return
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
