"""Markup converter — `&`-style color/format codes → ANSI escape sequences.

Text is formatted by typing a marker (`&` by default) followed by a format
code, then the text to be formatted:

    >>> d = Dahlia(Depth.HIGH)
    >>> d.convert("&aHello &cWorld")
    '\\x1b[38;2;85;255;85mHello \\x1b[38;2;255;85;85mWorld\\x1b[0m'
"""

from __future__ import annotations

import builtins
import logging
import re
import sys
from typing import Any, TextIO

from dahlia.config import DahliaConfig
from dahlia.constants import COLOR_CODES, Depth
from dahlia.patterns import ANSI_REGEXES, create_patterns, remove_all_patterns
from dahlia.resolver import InvalidCodeError, resolve

log = logging.getLogger(__name__)


class Dahlia:
    """Converter bound to a fixed depth, marker and reset/color behaviour."""

    __slots__ = ("_depth", "_marker", "_no_reset", "_no_color", "_patterns")

    def __init__(
        self,
        depth: Depth | int = Depth.HIGH,
        no_reset: bool = False,
        marker: str = "&",
        no_color: bool = False,
    ) -> None:
        if len(marker) != 1:
            raise ValueError(f"Marker must be a single character, got {marker!r}")
        self._depth = Depth(depth)
        self._marker = marker
        self._no_reset = no_reset
        self._no_color = no_color
        self._patterns = tuple(create_patterns(marker))
        log.debug(
            "Dahlia(depth=%d, marker=%r, no_reset=%s, no_color=%s)",
            self._depth, marker, no_reset, no_color,
        )

    @classmethod
    def from_config(cls, config: DahliaConfig) -> Dahlia:
        return cls(
            depth=config.depth,
            no_reset=config.no_reset,
            marker=config.marker,
            no_color=config.no_color,
        )

    @property
    def depth(self) -> Depth:
        return self._depth

    @property
    def marker(self) -> str:
        return self._marker

    @property
    def no_reset(self) -> bool:
        """When true, no reset code is appended to converted text."""
        return self._no_reset

    @property
    def no_color(self) -> bool:
        """When true, `convert` strips markup like `clean` does."""
        return self._no_color

    def __repr__(self) -> str:
        return (
            f"Dahlia(depth={self._depth!r}, no_reset={self._no_reset}, "
            f"marker={self._marker!r}, no_color={self._no_color})"
        )

    # ── Conversion ───────────────────────────────────────────────

    def convert(self, text: str) -> str:
        """Replace every markup code in `text` with its escape sequence.

        Symbolic codes are substituted across the whole text before hex
        literals. A reset code is appended unless `no_reset` is set or the
        text already ends with one.

        Raises InvalidCodeError on the first code the depth can't render.
        """
        if self._no_color:
            return remove_all_patterns(self._patterns, text)

        reset = f"{self._marker}r"
        if not (self._no_reset or text.endswith(reset)):
            text += reset

        for pattern in self._patterns:
            text = pattern.sub(self._replace, text)
        return text

    def _replace(self, m: re.Match[str]) -> str:
        bg, code = m.group(1), m.group(2)
        try:
            return resolve(code, bg == "~", self._depth)
        except InvalidCodeError:
            raise InvalidCodeError(code, m.group(0)) from None

    # ── Console helpers ──────────────────────────────────────────

    def test(self) -> str:
        """Return a string exercising every color and format code."""
        mk = self._marker
        colors = "".join(f"{mk}{ch}{ch}" for ch in COLOR_CODES)
        formats = "".join(f"{mk}r{mk}{ch}{ch}" for ch in "lmno")
        return self.convert(colors + formats)

    def reset(self, file: TextIO | None = None) -> None:
        """Write a reset sequence, clearing all active modifiers."""
        (file or sys.stdout).write(self.convert(f"{self._marker}r"))

    def print(self, *msgs: str, **kwargs: Any) -> None:
        """`print` wrapper that converts each message first.

        These are equivalent:

            print(d.convert("Hello &3World&r!"))
            d.print("Hello &3World&r!")
        """
        builtins.print(*map(self.convert, msgs), **kwargs)

    def input(self, prompt: str = "") -> str:
        """Show the converted prompt and read one line, without the newline."""
        return builtins.input(self.convert(prompt))


def clean(text: str, marker: str = "&") -> str:
    """Remove all markup codes from a string.

        >>> clean("&2>be me")
        '>be me'
    """
    return remove_all_patterns(create_patterns(marker), text)


def clean_ansi(text: str) -> str:
    """Remove the ANSI sequences a converter emits from a string."""
    return remove_all_patterns(ANSI_REGEXES, text)
