"""
Summary: Public Path class composing value, navigation, inspection, walking and mutation.
Why: Callers import one chainable type; each concern stays in its own module.
"""

from __future__ import annotations

import os
import re
from typing import Final

from typing_extensions import override

from teapath.shared.errors import UnexpectedOSError

from .content import ContentMixin
from .oscall import os_call
from .tempdir import make_temp_directory


class Path(ContentMixin):
    """Normalized absolute path.

    Examples:
        >>> Path("/usr//local/./bin/../lib")
        Path('/usr/local/lib')
        >>> Path.root().join("tmp", "", "a").parent()
        Path('/tmp')
    """

    __slots__ = ()

    @override
    def _derive(self, string: str) -> Path:
        return Path(string)

    @staticmethod
    def root() -> Path:
        return _ROOT

    @staticmethod
    def cwd() -> Path:
        """Return the current working directory, read at call time."""

        with os_call("getcwd", "."):
            return Path(os.getcwd())

    @staticmethod
    def home() -> Path:
        """Return the current user's home directory, read at call time."""

        home = os.path.expanduser("~")
        if not os.path.isabs(home):
            raise UnexpectedOSError("no home directory", path=home)
        return Path(home)

    @staticmethod
    def mktemp(*, prefix: str | None = None, dir: Path | None = None) -> Path:
        """Create a uniquely named temporary directory and return it."""

        return Path(make_temp_directory(prefix=prefix, dir=dir))

    def pretty_string(self) -> str:
        """Return the path with a leading home directory shown as ``~``."""

        home = Path.home().string
        if home == "/":
            return self.string
        return re.sub(f"^{re.escape(home)}(?=/|$)", "~", self.string)

    def pretty_local_string(self) -> str:
        """Return ``./<relative>`` when under the cwd, else ``pretty_string()``."""

        cwd = Path.cwd()
        if self.string == cwd.string or self.string.startswith(cwd.string.rstrip("/") + "/"):
            return f"./{self.relative(to=cwd)}"
        return self.pretty_string()


_ROOT: Final[Path] = Path("/")


__all__ = ["Path"]
