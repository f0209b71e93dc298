"""Exceptions raised when an image spec is configured with bad values."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Base class for rejected ImageSpec configuration."""


class InvalidNameError(ConfigurationError):
    """Raised when a filename hint cannot be encoded as UTF-8."""


class InvalidDimensionError(ConfigurationError):
    """Raised for a negative or non-integer width / height."""


class InvalidTerminatorError(ConfigurationError):
    """Raised when a terminator is neither BEL nor ST."""
