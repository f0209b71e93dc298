"""Protocol constants and defaults for iterm2img."""

from __future__ import annotations

from enum import Enum

from iterm2img.errors import InvalidTerminatorError


# ── Control sequences ───────────────────────────────────────────────

OSC = "\x1b]"          # operating system command introducer
FILE_TAG = "1337;File="


class Terminator(str, Enum):
    BEL = "\x07"
    ST = "\x1b\\"      # string terminator


_TERMINATOR_NAMES: dict[str, Terminator] = {
    "bel": Terminator.BEL,
    "st": Terminator.ST,
}


# ── Defaults ────────────────────────────────────────────────────────

DEFAULT_TERMINATOR = Terminator.BEL
DEFAULT_PRESERVE_ASPECT_RATIO = True
DEFAULT_INLINE = False


def resolve_terminator(value: Terminator | str | None) -> Terminator:
    """Map *value* to a :class:`Terminator`.

    ``None`` means BEL. Accepts a member, its raw control string, or the
    names ``"bel"`` / ``"st"`` (any case).
    """
    if value is None:
        return DEFAULT_TERMINATOR
    if isinstance(value, Terminator):
        return value
    if isinstance(value, str):
        by_name = _TERMINATOR_NAMES.get(value.strip().lower())
        if by_name is not None:
            return by_name
        try:
            return Terminator(value)
        except ValueError:
            pass
    raise InvalidTerminatorError(
        f"Unknown terminator {value!r}; expected one of: "
        + ", ".join(sorted(_TERMINATOR_NAMES))
    )
