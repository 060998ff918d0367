"""Code resolver — markup code + background flag + depth → escape fragment."""

from __future__ import annotations

import re

from dahlia.constants import (
    BG_FORMAT_TEMPLATES,
    COLORS,
    COLORS_24BIT,
    FORMAT_TEMPLATES,
    FORMATTERS,
    Depth,
)
from dahlia.templates import fill_rgb_template, fill_template

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")

# SGR background parameters sit 10 above their foreground counterparts
_BG_OFFSET = 10


class InvalidCodeError(ValueError):
    """A markup code that has no entry for the active depth."""

    def __init__(self, code: str, token: str | None = None) -> None:
        super().__init__(f"Invalid code: {token if token is not None else code}")
        self.code = code
        self.token = token


def hex_to_rgb(code: str) -> tuple[str, str, str]:
    """Split `RRGGBB` into decimal component strings."""
    r, g, b = (str(int(code[i:i + 2], 16)) for i in (0, 2, 4))
    return r, g, b


def resolve(code: str, background: bool, depth: Depth) -> str:
    """Return the escape sequence for a single code.

    Hex literals are always rendered as 24-bit color and format codes
    always use the plain attribute template, whatever the depth. Symbolic
    colors go through the depth's own table and template.

    Raises InvalidCodeError when the code has no entry for the depth.
    """
    templates = BG_FORMAT_TEMPLATES if background else FORMAT_TEMPLATES

    if _HEX_RE.fullmatch(code):
        return fill_rgb_template(templates[Depth.HIGH], *hex_to_rgb(code))

    if code in FORMATTERS:
        return fill_template(templates[Depth.TTY], FORMATTERS[code])

    depth = Depth(depth)
    template = templates[depth]

    if depth == Depth.HIGH:
        rgb = COLORS_24BIT.get(code)
        if rgb is None:
            raise InvalidCodeError(code)
        return fill_rgb_template(template, *rgb)

    value = COLORS[depth].get(code)
    if value is None:
        raise InvalidCodeError(code)
    if background and depth <= Depth.LOW:
        value = str(int(value) + _BG_OFFSET)
    return fill_template(template, value)
