"""Build iTerm2 inline image protocol (OSC 1337) strings from raw bytes."""

from iterm2img.builder import ImageSpec, from_bytes
from iterm2img.config import Terminator
from iterm2img.dimension import Auto, Cells, Dimension, Percent, Pixels
from iterm2img.errors import (
    ConfigurationError,
    InvalidDimensionError,
    InvalidNameError,
    InvalidTerminatorError,
)

__version__ = "0.1.0"

__all__ = [
    "Auto",
    "Cells",
    "ConfigurationError",
    "Dimension",
    "ImageSpec",
    "InvalidDimensionError",
    "InvalidNameError",
    "InvalidTerminatorError",
    "Percent",
    "Pixels",
    "Terminator",
    "from_bytes",
]
