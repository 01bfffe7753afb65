# errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a machine part is built from settings it cannot honour."""
