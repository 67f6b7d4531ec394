"""teapath: normalized absolute filesystem paths for command-line tooling."""

from .path import DirEntry, EntryKind, Path
from .platform.host import Host, host
from .prefix import Prefix, use_prefix
from .shared.errors import (
    AlreadyExistsError,
    ErrorKind,
    InvalidPathError,
    NotFoundError,
    PathError,
    UnexpectedOSError,
)

__version__ = "0.1.0"

__all__ = [
    "AlreadyExistsError",
    "DirEntry",
    "EntryKind",
    "ErrorKind",
    "Host",
    "InvalidPathError",
    "NotFoundError",
    "Path",
    "PathError",
    "Prefix",
    "UnexpectedOSError",
    "host",
    "use_prefix",
]
