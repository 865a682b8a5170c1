import errno
import os
from pathlib import Path

import pytest

from Drop_Store.core.store import DropStore


class FakeClock:
    def __init__(self, now: int = 1700000000):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(tmp_path: Path, clock):
    return DropStore(tmp_path / "store", clock=clock)


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    d = tmp_path / "home" / "u"
    d.mkdir(parents=True)
    return d.resolve()


@pytest.fixture
def cross_device(monkeypatch):
    """
    Make every rename or hard link between two different directories fail
    with EXDEV, as if they were on different filesystems.
    """
    def same_dir_only(real):
        def fake(src, dst, *args, **kwargs):
            if os.path.dirname(os.fspath(src)) != os.path.dirname(os.fspath(dst)):
                raise OSError(errno.EXDEV, "Invalid cross-device link")
            return real(src, dst, *args, **kwargs)
        return fake

    monkeypatch.setattr(os, "rename", same_dir_only(os.rename))
    monkeypatch.setattr(os, "link", same_dir_only(os.link))
