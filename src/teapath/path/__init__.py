"""
Summary: Public surface for the absolute path abstraction.
Why: Provide one import path for Path and the iteration value types.
"""

from .path import Path
from .walking import DirEntry, EntryKind

__all__ = ["DirEntry", "EntryKind", "Path"]
