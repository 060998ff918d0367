"""Escape-sequence template filling."""

from __future__ import annotations


def fill_template(template: str, value: str) -> str:
    """Replace the single `{}` placeholder with an ANSI parameter."""
    return template.replace("{}", value, 1)


def fill_rgb_template(template: str, r: str, g: str, b: str) -> str:
    """Replace `{r}`, `{g}` and `{b}` with decimal color components."""
    return template.replace("{r}", r, 1).replace("{g}", g, 1).replace("{b}", b, 1)
