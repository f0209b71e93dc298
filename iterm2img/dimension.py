"""Width / height values for the inline image protocol.

A dimension is one of:

* ``Auto()``: let the terminal decide (attribute omitted).
* ``Cells(n)``: *n* character cells, rendered as ``n``.
* ``Pixels(n)``: *n* pixels, rendered as ``npx``.
* ``Percent(n)``: *n* percent of the session width / height, rendered as ``n%``.

A value of zero is passed through; the terminal treats it as auto.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from iterm2img.errors import InvalidDimensionError


def _check_amount(kind: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimensionError(
            f"{kind} expects a non-negative int, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidDimensionError(f"{kind} must be non-negative, got {value}")


@dataclass(frozen=True)
class Auto:
    pass


@dataclass(frozen=True)
class Cells:
    value: int

    def __post_init__(self) -> None:
        _check_amount("Cells", self.value)


@dataclass(frozen=True)
class Pixels:
    value: int

    def __post_init__(self) -> None:
        _check_amount("Pixels", self.value)


@dataclass(frozen=True)
class Percent:
    value: int

    def __post_init__(self) -> None:
        _check_amount("Percent", self.value)


Dimension = Union[Auto, Cells, Pixels, Percent]


def to_dimension(value: Dimension | int) -> Dimension:
    """Coerce *value* to a Dimension; a bare int means a cell count."""
    if isinstance(value, (Auto, Cells, Pixels, Percent)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Cells(value)
    raise InvalidDimensionError(
        f"Expected a Dimension or int, got {type(value).__name__}"
    )


def render(dim: Dimension) -> str | None:
    """Return the attribute value for *dim*, or None when it should be omitted."""
    match dim:
        case Auto():
            return None
        case Cells(value=n):
            return str(n)
        case Pixels(value=n):
            return f"{n}px"
        case Percent(value=n):
            return f"{n}%"
    raise InvalidDimensionError(f"Not a Dimension: {dim!r}")
