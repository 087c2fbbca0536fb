"""Repeating brightness ramp used to tell consecutive edges apart.

Arguments left as ``None`` fall back to the current visualizer config.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional, Tuple

from .config import get_visualizer_config
from .types import RGB

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def parse_hex_color(text: str) -> RGB:
    match = _HEX_RE.match(text.strip())
    if not match:
        raise ValueError(f"expected a #RRGGBB color (got {text!r})")
    digits = match.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def to_hex(color: RGB) -> str:
    return "#{:02X}{:02X}{:02X}".format(*color)


def brightness_ratio(
    level: int,
    levels: Optional[int] = None,
    *,
    min_ratio: Optional[float] = None,
    max_ratio: Optional[float] = None,
) -> float:
    """Linear ramp from ``max_ratio`` (level 0) down to ``min_ratio`` (level ``levels``)."""

    config = get_visualizer_config()
    levels = config.palette_size if levels is None else levels
    min_ratio = config.min_brightness if min_ratio is None else min_ratio
    max_ratio = config.max_brightness if max_ratio is None else max_ratio
    progress = level / levels
    return max_ratio - progress * (max_ratio - min_ratio)


def scale_color(color: RGB, ratio: float) -> RGB:
    # Channels truncate towards zero like a byte cast, then clamp at 0.
    return tuple(max(0, int(channel * ratio)) for channel in color)  # type: ignore[return-value]


@lru_cache(maxsize=None)
def _palette(base_color: str, levels: int, min_ratio: float, max_ratio: float) -> Tuple[RGB, ...]:
    if levels <= 0:
        raise ValueError(f"palette needs at least one level (got {levels})")
    base = parse_hex_color(base_color)
    return tuple(
        scale_color(base, brightness_ratio(level, levels, min_ratio=min_ratio, max_ratio=max_ratio))
        for level in range(1, levels + 1)
    )


def step_palette(
    base_color: Optional[str] = None,
    levels: Optional[int] = None,
    min_ratio: Optional[float] = None,
    max_ratio: Optional[float] = None,
) -> Tuple[RGB, ...]:
    config = get_visualizer_config()
    return _palette(
        config.base_color if base_color is None else base_color,
        config.palette_size if levels is None else levels,
        config.min_brightness if min_ratio is None else min_ratio,
        config.max_brightness if max_ratio is None else max_ratio,
    )


def step_color(
    step: int,
    base_color: Optional[str] = None,
    levels: Optional[int] = None,
    min_ratio: Optional[float] = None,
    max_ratio: Optional[float] = None,
) -> RGB:
    palette = step_palette(base_color, levels, min_ratio, max_ratio)
    return palette[step % len(palette)]
