import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from Drop_Store.core.errors import ConflictError, DropError, PartialFailureError
from Drop_Store.core.models import UnrecognizedEntry
from Drop_Store.core.store import (
    DEFAULT_STORE_MODE,
    DEFAULT_STORE_ROOT,
    SELECT_ALL,
    SELECT_LATEST,
    SELECT_POLICIES,
    DropStore,
)
from Drop_Store.utils.logger import log, setup_logging

PROG = "dr"

DESCRIPTION = """\
Drop files from the current path until the next reboot, after which they
are permanently deleted from the file system.
All commands are exclusive."""

EPILOG = """\
examples:
  dr foo.txt      drop the file
  dr -r foo.txt   recover the file
  dr -d foo.txt   delete forever
  dr -l           list all dropped files"""


# ----------------------------
# Settings
# ----------------------------

SETTINGS_PATH = Path.home() / ".config" / "dr" / "settings.json"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

DEFAULT_SETTINGS = {
    "store": {
        "root": str(DEFAULT_STORE_ROOT),
        "mode": DEFAULT_STORE_MODE,
    },
    "select": "strict",
    "logging": {"level": "WARNING"},
}


def load_settings(settings_path=None) -> Dict[str, Any]:
    """
    Defaults, updated per section from the JSON settings file.

    DR_SETTINGS points at another settings file, DR_STORE overrides the
    store root.
    """
    path = settings_path or os.environ.get("DR_SETTINGS") or SETTINGS_PATH
    path = Path(path).expanduser()

    merged = json.loads(json.dumps(DEFAULT_SETTINGS))

    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            user_settings = json.load(f)

        if not isinstance(user_settings, dict):
            raise ValueError(f"{path}: expected a JSON object")

        for k, v in user_settings.items():
            if isinstance(v, dict) and isinstance(merged.get(k), dict):
                merged[k].update(v)
            else:
                merged[k] = v

    if os.environ.get("DR_STORE") and isinstance(merged["store"], dict):
        merged["store"]["root"] = os.environ["DR_STORE"]

    return validate_settings(merged)


def validate_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check the sections run() relies on; raises ValueError naming the bad key.
    Normalises an octal string store.mode ("0700") to an int.
    """
    for section in ("store", "logging"):
        if not isinstance(settings.get(section), dict):
            raise ValueError(f"'{section}' must be an object")

    store = settings["store"]
    if not isinstance(store.get("root"), str) or not store["root"]:
        raise ValueError("'store.root' must be a non-empty string")

    mode = store.get("mode", DEFAULT_STORE_MODE)
    if isinstance(mode, str):
        mode = int(mode, 8)
    if not isinstance(mode, int) or isinstance(mode, bool):
        raise ValueError(f"'store.mode' must be an octal string or integer: {mode!r}")
    store["mode"] = mode

    level = settings["logging"].get("level", "WARNING")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(f"'logging.level' must be one of {', '.join(LOG_LEVELS)}: {level!r}")

    return settings


# ----------------------------
# Arguments
# ----------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "-l", "--list", dest="command", action="store_const", const="list",
        help="list all dropped filepaths",
    )
    commands.add_argument(
        "-r", "--recover", dest="command", action="store_const", const="recover",
        help="recover previously dropped entries",
    )
    commands.add_argument(
        "-d", "--delete", dest="command", action="store_const", const="delete",
        help="delete dropped entries permanently",
    )

    which = parser.add_mutually_exclusive_group()
    which.add_argument(
        "--latest", dest="select", action="store_const", const=SELECT_LATEST,
        help="on several matches, take the most recently dropped one",
    )
    which.add_argument(
        "--all", dest="select", action="store_const", const=SELECT_ALL,
        help="on several matches, take all of them",
    )

    parser.add_argument("--store", metavar="DIR", help="store directory")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log what happens (twice for debug output)",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        args.command = "drop"

    if args.command == "list" and args.paths:
        parser.error("--list takes no paths")
    if args.command != "list" and not args.paths:
        parser.error("Missing filepaths")
    if args.select and args.command not in ("recover", "delete"):
        parser.error("--latest and --all only apply to --recover and --delete")

    return args


# ----------------------------
# Commands
# ----------------------------

def _fail(message: str):
    print(f"{PROG}: {message}", file=sys.stderr)


def _report_failures(exc: PartialFailureError):
    for _entry, err in exc.failures:
        _fail(str(err))


def drop_paths(store: DropStore, paths: List[str]) -> int:
    failed = 0
    for path in paths:
        try:
            store.drop_file(path)
        except DropError as exc:
            _fail(str(exc))
            failed += 1
            continue
        print(f"Dropped: {path}")
    return failed


def recover_paths(store: DropStore, identifiers: List[str], select: str) -> int:
    failed = 0
    for ident in identifiers:
        try:
            recovered = store.recover_file(ident, select)
        except ConflictError as exc:
            recovered = exc.recovered
            _fail(str(exc))
            failed += 1
        except PartialFailureError as exc:
            recovered = exc.succeeded
            _report_failures(exc)
            failed += 1
        except DropError as exc:
            _fail(str(exc))
            failed += 1
            continue

        for entry in recovered:
            print(f"Recovered: {entry.original_path}")
    return failed


def delete_paths(store: DropStore, identifiers: List[str], select: str) -> int:
    failed = 0
    for ident in identifiers:
        try:
            deleted = store.delete_file(ident, select)
        except PartialFailureError as exc:
            deleted = exc.succeeded
            _report_failures(exc)
            failed += 1
        except DropError as exc:
            _fail(str(exc))
            failed += 1
            continue

        for entry in deleted:
            print(f"Permanently deleted: {entry.original_path}")
    return failed


def format_entry(entry) -> str:
    if isinstance(entry, UnrecognizedEntry):
        return f"{'?':<19}  {entry.name}  (unrecognized: {entry.reason})"

    stamp = entry.dropped_at.strftime("%Y-%m-%d %H:%M:%S")
    suffix = "/" if entry.is_dir else ""
    return f"{stamp}  {entry.original_path}{suffix}"


def list_paths(store: DropStore) -> int:
    try:
        for entry in store.list_entries():
            print(format_entry(entry))
    except DropError as exc:
        _fail(str(exc))
        return 1
    return 0


# ----------------------------
# CLI Orchestrator
# ----------------------------

def run(argv: Optional[List[str]] = None, *, settings=None, store=None) -> int:
    """
    Run one dr command and return the process exit code.

    Every path is handled even if an earlier one failed; the exit code is
    1 when any of them did.
    """
    args = parse_args(argv)
    try:
        if settings is None:
            settings = load_settings()
        else:
            validate_settings(settings)
    except (OSError, ValueError) as exc:
        _fail(f"cannot read settings: {exc}")
        return 1

    level = settings.get("logging", {}).get("level", "WARNING")
    if args.verbose:
        level = "INFO" if args.verbose == 1 else "DEBUG"
    setup_logging(level)

    select = args.select or settings.get("select", "strict")
    if select not in SELECT_POLICIES:
        _fail(f"invalid select policy in settings: {select!r}")
        return 1

    if store is None:
        store = DropStore(
            args.store or settings["store"]["root"],
            mode=settings["store"]["mode"],
        )

    log("DEBUG", "cli", f"{args.command} {args.paths} (store: {store.root})")

    if args.command == "list":
        return list_paths(store)

    if args.command == "recover":
        failed = recover_paths(store, args.paths, select)
    elif args.command == "delete":
        failed = delete_paths(store, args.paths, select)
    else:
        failed = drop_paths(store, args.paths)

    return 1 if failed else 0


def main():
    sys.exit(run())
