"""Markup token patterns and ANSI escape-sequence patterns.

Markup forms (with `&` as the marker):
  &X           foreground color / format code
  &~X          background color
  &[#RRGGBB]   foreground hex color
  &~[#RRGGBB]  background hex color
"""

from __future__ import annotations

import re
from typing import Iterable

# Group 1: optional background marker, group 2: code body
CODE_REGEXES = (
    r"(~?)([0-9a-gl-or])",
    r"(~?)\[#([0-9a-fA-F]{6})\]",
)

# Emitted sequences: attribute / 3-4 bit, 8-bit, 24-bit
ANSI_REGEXES = (
    re.compile(r"\033\[(\d+)m"),
    re.compile(r"\033\[[34]8;5;(\d+)m"),
    re.compile(r"\033\[[34]8;2;(\d+);(\d+);(\d+)m"),
)


def create_patterns(marker: str) -> list[re.Pattern[str]]:
    """Compile the symbolic-code and hex-literal patterns for a marker.

    The marker is escaped, so characters like `$` or `.` match literally.
    """
    prefix = re.escape(marker)
    return [re.compile(prefix + regex) for regex in CODE_REGEXES]


def remove_all_patterns(patterns: Iterable[re.Pattern[str]], text: str) -> str:
    """Apply each pattern in turn, deleting every match."""
    for pattern in patterns:
        text = pattern.sub("", text)
    return text
