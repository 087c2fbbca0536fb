"""Fixed-delay pacing for drawable edges."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional, TypeVar

from .config import get_visualizer_config

logger = logging.getLogger(__name__)

T = TypeVar("T")


def play_edges(
    edges: Iterable[T],
    draw: Callable[[T], None],
    *,
    delay_ms: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Hand each edge to ``draw`` and pause ``delay_ms`` after it.

    ``delay_ms`` defaults to the configured step delay. Returns the number of
    edges drawn.
    """

    if delay_ms is None:
        delay_ms = get_visualizer_config().step_delay_ms
    if delay_ms < 0:
        raise ValueError(f"delay_ms must be non-negative (got {delay_ms})")
    count = 0
    for edge in edges:
        draw(edge)
        count += 1
        if delay_ms:
            sleep(delay_ms / 1000.0)
    logger.debug("Played %d edge(s) with %sms delay", count, delay_ms)
    return count
