# Auto-generated __init__.py

from . import encoding
from .encoding import decode_name
from .encoding import encode_name
from . import errors
from .errors import AmbiguousError
from .errors import ConflictError
from .errors import DropError
from .errors import NotFoundError
from .errors import PartialFailureError
from .errors import PermissionDeniedError
from .errors import TransferError
from .errors import UnrecognizedNameError
from . import models
from .models import DroppedEntry
from .models import UnrecognizedEntry
from . import store
from .store import DEFAULT_STORE_ROOT
from .store import DropStore
from . import transfer
from .transfer import move_path

__all__ = [
    "encoding",
    "errors",
    "models",
    "store",
    "transfer",
    "AmbiguousError",
    "ConflictError",
    "DEFAULT_STORE_ROOT",
    "DropError",
    "DropStore",
    "DroppedEntry",
    "NotFoundError",
    "PartialFailureError",
    "PermissionDeniedError",
    "TransferError",
    "UnrecognizedEntry",
    "UnrecognizedNameError",
    "decode_name",
    "encode_name",
    "move_path",
]
