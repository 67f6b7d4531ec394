"""Host detection and logging infrastructure."""

from .host import Host, UnsupportedArchitectureError, host

__all__ = ["Host", "UnsupportedArchitectureError", "host"]
