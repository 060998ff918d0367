"""Color and format tables — symbolic code → ANSI parameter per color depth.

Color | 3-bit | 8-bit | 24-bit
--- | --- | --- | ---
`0` | `#000000` | `#000000` | `#000000`
`1` | `#000080` | `#0000af` | `#0000aa`
`2` | `#008000` | `#00af00` | `#00aa00`
`3` | `#008080` | `#00afaf` | `#00aaaa`
`4` | `#800000` | `#af0000` | `#aa0000`
`5` | `#800080` | `#af00af` | `#aa00aa`
`6` | `#808000` | `#ffaf00` | `#ffaa00`
`7` | `#c0c0c0` | `#a8a8a8` | `#aaaaaa`
`8` | `#000000` | `#585858` | `#555555`
`9` | `#000080` | `#afafff` | `#5555ff`
`a` | `#008000` | `#5fff5f` | `#55ff55`
`b` | `#000080` | `#5fffff` | `#55ffff`
`c` | `#800000` | `#ff5f5f` | `#ff5555`
`d` | `#800080` | `#ff5fff` | `#ff55ff`
`e` | `#808000` | `#ffff5f` | `#ffff55`
`f` | `#c0c0c0` | `#ffffff` | `#ffffff`
`g` | `#808000` | `#d7d700` | `#ddd605`
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class Depth(IntEnum):
    """Usable color depth levels, in bits."""

    TTY = 3
    LOW = 4
    MEDIUM = 8
    HIGH = 24

    @classmethod
    def parse(cls, value: int | str | Depth) -> Depth:
        """Accept a bit count (3/4/8/24) or a member name, case-insensitive."""
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                value = int(text)
            else:
                try:
                    return cls[text.upper()]
                except KeyError:
                    raise ValueError(f"Unknown color depth: {value!r}") from None
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown color depth: {value!r}") from None


COLOR_CODES = "0123456789abcdefg"
FORMAT_CODES = "lmnor"

_ESC = "\033["

# ── Templates ({} = ANSI parameter, {r}/{g}/{b} = RGB components) ──

FORMAT_TEMPLATES: Mapping[Depth, str] = MappingProxyType({
    Depth.TTY: f"{_ESC}{{}}m",
    Depth.LOW: f"{_ESC}{{}}m",
    Depth.MEDIUM: f"{_ESC}38;5;{{}}m",
    Depth.HIGH: f"{_ESC}38;2;{{r}};{{g}};{{b}}m",
})

BG_FORMAT_TEMPLATES: Mapping[Depth, str] = MappingProxyType({
    Depth.TTY: f"{_ESC}{{}}m",
    Depth.LOW: f"{_ESC}{{}}m",
    Depth.MEDIUM: f"{_ESC}48;5;{{}}m",
    Depth.HIGH: f"{_ESC}48;2;{{r}};{{g}};{{b}}m",
})

# ── Color tables ─────────────────────────────────────────────────

COLORS_3BIT: Mapping[str, str] = MappingProxyType({
    "0": "30", "1": "34", "2": "32", "3": "36",
    "4": "31", "5": "35", "6": "33", "7": "37",
    "8": "30", "9": "34", "a": "32", "b": "34",
    "c": "31", "d": "35", "e": "33", "f": "37",
    "g": "33",
})

COLORS_8BIT: Mapping[str, str] = MappingProxyType({
    "0": "0", "1": "19", "2": "34", "3": "37",
    "4": "124", "5": "127", "6": "214", "7": "248",
    "8": "240", "9": "147", "a": "83", "b": "87",
    "c": "203", "d": "207", "e": "227", "f": "15",
    "g": "184",
})

COLORS_24BIT: Mapping[str, tuple[str, str, str]] = MappingProxyType({
    "0": ("0", "0", "0"),
    "1": ("0", "0", "170"),
    "2": ("0", "170", "0"),
    "3": ("0", "170", "170"),
    "4": ("170", "0", "0"),
    "5": ("170", "0", "170"),
    "6": ("255", "170", "0"),
    "7": ("170", "170", "170"),
    "8": ("85", "85", "85"),
    "9": ("85", "85", "255"),
    "a": ("85", "255", "85"),
    "b": ("85", "255", "255"),
    "c": ("255", "85", "85"),
    "d": ("255", "85", "255"),
    "e": ("255", "255", "85"),
    "f": ("255", "255", "255"),
    "g": ("221", "214", "5"),
})

# Numeric tables by depth; 4-bit reuses the 3-bit table
COLORS: Mapping[Depth, Mapping[str, str]] = MappingProxyType({
    Depth.TTY: COLORS_3BIT,
    Depth.LOW: COLORS_3BIT,
    Depth.MEDIUM: COLORS_8BIT,
})

# Format codes
FORMATTERS: Mapping[str, str] = MappingProxyType({
    "l": "1",  # bold
    "m": "9",  # strikethrough
    "n": "4",  # underline
    "o": "3",  # italic
    "r": "0",  # reset
})
