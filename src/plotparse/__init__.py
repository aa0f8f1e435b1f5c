"""plotparse – property listing extraction for classified chat messages."""

from ._version import __version__

__all__ = [
    "__version__",
    "cli",
    "config",
    "extraction",
    "utils",
]
