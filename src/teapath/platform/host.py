"""Host platform and CPU architecture detection.

Where: platform/host.py
What: Normalize ``sys.platform`` and ``platform.machine()`` into build tags.
Why: Package selection keys off one ``<platform>-<arch>`` target string.
"""

from __future__ import annotations

import logging
import platform as platform_module
import sys
from dataclasses import dataclass
from typing import Final, Literal

SupportedPlatform = Literal["darwin", "linux", "win32", "freebsd", "netbsd", "aix", "sunos"]
SupportedArchitecture = Literal["x86-64", "aarch64"]

_PLATFORMS: Final[tuple[SupportedPlatform, ...]] = (
    "darwin",
    "linux",
    "win32",
    "freebsd",
    "netbsd",
    "aix",
    "sunos",
)
_ARCHITECTURES: Final[dict[str, SupportedArchitecture]] = {
    "x86_64": "x86-64",
    "amd64": "x86-64",
    "arm64": "aarch64",
    "aarch64": "aarch64",
}

logger = logging.getLogger("teapath")


class UnsupportedArchitectureError(RuntimeError):
    """Raised when the CPU architecture has no build tag."""


@dataclass(slots=True, frozen=True)
class Host:
    """Normalized description of the running host."""

    platform: SupportedPlatform
    arch: SupportedArchitecture

    @property
    def target(self) -> str:
        return f"{self.platform}-{self.arch}"

    @property
    def build_ids(self) -> tuple[SupportedPlatform, SupportedArchitecture]:
        return self.platform, self.arch


def _normalize_platform(raw: str) -> SupportedPlatform:
    # sys.platform is "freebsd14", "sunos5", ...
    for candidate in _PLATFORMS:
        if raw.startswith(candidate):
            return candidate
    logger.warning("assuming linux mode for: %s", raw)
    return "linux"


def _normalize_arch(raw: str) -> SupportedArchitecture:
    try:
        return _ARCHITECTURES[raw.lower()]
    except KeyError:
        raise UnsupportedArchitectureError(f"unsupported-arch: {raw}") from None


def host(*, system: str | None = None, machine: str | None = None) -> Host:
    """Detect the current host.

    Args:
        system: Override for ``sys.platform``.
        machine: Override for ``platform.machine()``.

    Returns:
        Host: Normalized platform and architecture.

    Raises:
        UnsupportedArchitectureError: The architecture is not supported.
    """
    return Host(
        platform=_normalize_platform(system if system is not None else sys.platform),
        arch=_normalize_arch(machine if machine is not None else platform_module.machine()),
    )


__all__ = ["Host", "SupportedArchitecture", "SupportedPlatform", "UnsupportedArchitectureError", "host"]
