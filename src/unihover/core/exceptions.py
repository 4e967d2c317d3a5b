"""Custom exception hierarchy for the hover preview pipeline."""

from __future__ import annotations


class UnihoverError(RuntimeError):
    """Base exception for unihover failures."""


class ConfigurationError(UnihoverError):
    """Raised when the settings file cannot be safely read or written."""


class PreferenceError(UnihoverError):
    """Raised when a font preference cannot be applied."""


__all__ = ["ConfigurationError", "PreferenceError", "UnihoverError"]
