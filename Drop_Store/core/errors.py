from typing import List, Optional, Tuple


class DropError(Exception):
    """
    Base class for every failure reported by the drop store.

    The CLI turns these into a message on stderr and a non-zero exit code.
    """
    kind = "Error"


class NotFoundError(DropError, LookupError):
    kind = "NotFound"


class PermissionDeniedError(DropError, PermissionError):
    kind = "PermissionDenied"


class TransferError(DropError, OSError):
    kind = "IOError"


class AmbiguousError(DropError, LookupError):
    kind = "Ambiguous"

    def __init__(self, identifier: str, matches: List):
        self.identifier = identifier
        self.matches = list(matches)
        names = ", ".join(m.name for m in self.matches)
        super().__init__(
            f"{identifier!r} matches {len(self.matches)} entries: {names} "
            "(use --latest or --all)"
        )


class ConflictError(DropError, FileExistsError):
    kind = "Conflict"

    def __init__(
        self,
        skipped: List,
        recovered: Optional[List] = None,
    ):
        self.skipped = list(skipped)
        self.recovered = list(recovered or [])
        paths = ", ".join(e.original_path for e in self.skipped)
        super().__init__(f"File already exists: {paths}")


class UnrecognizedNameError(ValueError):
    """Raised by decode_name for store filenames that do not decode."""
    kind = "Unrecognized"


class PartialFailureError(DropError):
    """
    Some of the entries an identifier matched failed, others went through.

    `succeeded` lists the entries that were handled, `failures` holds
    (entry, error) pairs for the rest.
    """
    kind = "Partial"

    def __init__(self, action: str, succeeded: List, failures: List[Tuple]):
        self.action = action
        self.succeeded = list(succeeded)
        self.failures = list(failures)
        details = "; ".join(str(err) for _entry, err in self.failures)
        super().__init__(
            f"Failed to {action} {len(self.failures)} of "
            f"{len(self.failures) + len(self.succeeded)} entries: {details}"
        )
