# errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a machine cannot be built from the settings given."""
