"""In-memory user directory served over HTTP."""

__version__ = "0.1.0"
