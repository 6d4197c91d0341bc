"""LogRouteEventLinker: isolated event namespace for logroute diagnostics.

All logroute subscribers register here. Separate from any other
pyventus usage in the process.
"""

from __future__ import annotations

from pyventus.events import EventLinker


class LogRouteEventLinker(EventLinker):
    """Isolated event namespace for logroute diagnostics."""

    pass
