"""Builder for iTerm2 inline image (OSC 1337) escape sequences."""

from __future__ import annotations

import base64
import logging

from iterm2img.config import (
    DEFAULT_INLINE,
    DEFAULT_PRESERVE_ASPECT_RATIO,
    FILE_TAG,
    OSC,
    Terminator,
    resolve_terminator,
)
from iterm2img.dimension import (
    Auto,
    Dimension,
    Percent,
    Pixels,
    render,
    to_dimension,
)
from iterm2img.errors import ConfigurationError, InvalidNameError

logger = logging.getLogger(__name__)


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def _check_flag(key: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"{key} expects a bool, got {type(value).__name__}"
        )
    return value


class ImageSpec:
    """Accumulates display options for one image and renders the sequence.

    Usage::

        seq = (
            from_bytes(png)
            .name("plot.png")
            .width_px(400)
            .inline(True)
            .build()
        )
        sys.stdout.write(seq)

    Every setter overwrites the previous value and returns the same spec.
    ``build()`` leaves the spec untouched, so calling it again yields the
    same string.
    """

    def __init__(self, data: bytes | bytearray | memoryview | list[int]) -> None:
        # bytes(int) would allocate a zero-filled buffer
        if data is None or isinstance(data, (str, int)):
            raise TypeError(
                f"ImageSpec expects a bytes-like object, got {type(data).__name__}"
            )
        self._data: bytes = bytes(data)
        self._name: bytes | None = None
        self._width: Dimension | None = None
        self._height: Dimension | None = None
        self._preserve_aspect_ratio: bool = DEFAULT_PRESERVE_ASPECT_RATIO
        self._inline: bool = DEFAULT_INLINE

    def __repr__(self) -> str:
        return (
            f"ImageSpec(size={len(self._data)}, name={self._name!r}, "
            f"width={self._width!r}, height={self._height!r}, "
            f"preserve_aspect_ratio={self._preserve_aspect_ratio}, "
            f"inline={self._inline})"
        )

    # ── setters ─────────────────────────────────────────────────

    def name(self, value: str | bytes) -> ImageSpec:
        """Set the filename hint.

        Strings are UTF-8 encoded here so an unencodable name (lone
        surrogates, for instance) is rejected before ``build()``.
        """
        if isinstance(value, (bytes, bytearray)):
            self._name = bytes(value)
            return self
        if not isinstance(value, str):
            raise InvalidNameError(
                f"name expects str or bytes, got {type(value).__name__}"
            )
        try:
            self._name = value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidNameError(f"name {value!r} is not valid UTF-8") from exc
        return self

    def width(self, value: Dimension | int) -> ImageSpec:
        """Set the width; a bare int is a cell count."""
        self._width = to_dimension(value)
        return self

    def width_px(self, value: int) -> ImageSpec:
        self._width = Pixels(value)
        return self

    def width_percent(self, value: int) -> ImageSpec:
        self._width = Percent(value)
        return self

    def width_auto(self) -> ImageSpec:
        self._width = Auto()
        return self

    def height(self, value: Dimension | int) -> ImageSpec:
        """Set the height; a bare int is a cell count."""
        self._height = to_dimension(value)
        return self

    def height_px(self, value: int) -> ImageSpec:
        self._height = Pixels(value)
        return self

    def height_percent(self, value: int) -> ImageSpec:
        self._height = Percent(value)
        return self

    def height_auto(self) -> ImageSpec:
        self._height = Auto()
        return self

    def preserve_aspect_ratio(self, value: bool) -> ImageSpec:
        self._preserve_aspect_ratio = _check_flag("preserve_aspect_ratio", value)
        return self

    def inline(self, value: bool) -> ImageSpec:
        self._inline = _check_flag("inline", value)
        return self

    # ── output ──────────────────────────────────────────────────

    def attributes(self) -> list[tuple[str, str]]:
        """Return the ``key=value`` pairs in emission order."""
        attrs: list[tuple[str, str]] = []
        if self._name is not None:
            attrs.append(("name", _b64(self._name)))
        attrs.append(("size", str(len(self._data))))
        for key, dim in (("width", self._width), ("height", self._height)):
            if dim is None:
                continue
            rendered = render(dim)
            if rendered is not None:
                attrs.append((key, rendered))
        attrs.append(("preserveAspectRatio", str(int(self._preserve_aspect_ratio))))
        attrs.append(("inline", str(int(self._inline))))
        return attrs

    def build(self, terminator: Terminator | str | None = None) -> str:
        """Return the complete escape sequence, payload included.

        *terminator* selects BEL or ST; the default is BEL.
        """
        term = resolve_terminator(terminator)
        params = ";".join(f"{key}={value}" for key, value in self.attributes())
        logger.debug("Encoding %d bytes with File=%s", len(self._data), params)
        return f"{OSC}{FILE_TAG}{params}:{_b64(self._data)}{term.value}"


def from_bytes(data: bytes | bytearray | memoryview | list[int]) -> ImageSpec:
    """Start a spec for *data* with default options."""
    return ImageSpec(data)
