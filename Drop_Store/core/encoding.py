"""
Store filename encoding.

A dropped file is stored as

    <timestamp>_<escaped original path>
    <timestamp>-<n>_<escaped original path>     (n >= 1, name was taken)

The escaped path is a single filename component: "%" is the escape
character and exactly three sequences are produced and accepted.
"""
import re
from typing import Tuple

from .errors import UnrecognizedNameError

ESCAPES = {
    "%": "%25",
    "/": "%2F",
    "\\": "%5C",
}
UNESCAPES = {v: k for k, v in ESCAPES.items()}

NAME_RE = re.compile(r"^(?P<ts>\d+)(?:-(?P<n>[1-9]\d*))?_(?P<path>.+)$", re.DOTALL)
ESCAPE_RE = re.compile(r"%(?:25|2F|5C)|%")


def escape_path(path: str) -> str:
    return "".join(ESCAPES.get(ch, ch) for ch in path)


def unescape_path(escaped: str) -> str:
    def _sub(match: re.Match) -> str:
        seq = match.group(0)
        if seq not in UNESCAPES:
            raise UnrecognizedNameError(f"bad escape at offset {match.start()}")
        return UNESCAPES[seq]

    return ESCAPE_RE.sub(_sub, escaped)


def encode_name(timestamp: int, original_path: str, disambiguator: int = 0) -> str:
    """
    Build the store filename for `original_path` dropped at `timestamp`.
    """
    if timestamp < 0:
        raise ValueError("timestamp must not be negative")
    if disambiguator < 0:
        raise ValueError("disambiguator must not be negative")
    if not _is_absolute(original_path):
        raise ValueError(f"not an absolute path: {original_path!r}")
    if "\0" in original_path:
        raise ValueError("path contains a NUL byte")

    stamp = str(int(timestamp))
    if disambiguator:
        stamp = f"{stamp}-{disambiguator}"
    return f"{stamp}_{escape_path(original_path)}"


def decode_name(name: str) -> Tuple[int, str, int]:
    """
    Reverse encode_name.

    Returns (timestamp, original_path, disambiguator). Raises
    UnrecognizedNameError for anything encode_name could not have produced.
    """
    match = NAME_RE.match(name)
    if not match:
        raise UnrecognizedNameError(f"not a dropped entry name: {name!r}")

    # a leading zero would make two names for the same timestamp
    ts = match.group("ts")
    if len(ts) > 1 and ts.startswith("0"):
        raise UnrecognizedNameError(f"timestamp has leading zeros: {name!r}")

    if "/" in match.group("path") or "\\" in match.group("path"):
        raise UnrecognizedNameError(f"unescaped separator in {name!r}")

    path = unescape_path(match.group("path"))
    if not _is_absolute(path):
        raise UnrecognizedNameError(f"decoded path is not absolute: {path!r}")

    return int(ts), path, int(match.group("n") or 0)


def _is_absolute(path: str) -> bool:
    # POSIX roots and Windows drive / UNC roots
    return path.startswith(("/", "\\")) or bool(re.match(r"^[A-Za-z]:[\\/]", path))
