"""External logging backends for the external sink."""

from logroute.backends.base import ExternalBackend
from logroute.backends.stdlib import StdlibBackend

__all__ = ["ExternalBackend", "StdlibBackend"]
