"""Configuration helpers for the visualizer."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass

from .types import RGB


@dataclass
class VisualizerConfig:
    """Drawing and pacing constants shared by the layout, scene, colors and animation."""

    marker_radius: float = 20.0
    radius_fill: float = 0.8
    arrow_length: float = 15.0
    arrow_spread: float = math.pi / 6
    cycle_marker_radius: float = 25.0
    cycle_marker_color: RGB = (255, 100, 100)
    marker_fill: RGB = (60, 60, 60)
    marker_stroke: RGB = (255, 255, 255)
    canvas_fill: RGB = (30, 30, 30)
    base_color: str = "#CCFF99"
    palette_size: int = 9
    min_brightness: float = 0.3
    max_brightness: float = 1.0
    step_delay_ms: float = 100.0
    edge_width: float = 4.0
    marker_stroke_width: float = 2.0
    cycle_marker_width: float = 4.0


_VISUALIZER_CONFIG = VisualizerConfig()


def get_visualizer_config() -> VisualizerConfig:
    return copy.deepcopy(_VISUALIZER_CONFIG)


def set_visualizer_config(config: VisualizerConfig) -> None:
    global _VISUALIZER_CONFIG
    _VISUALIZER_CONFIG = copy.deepcopy(config)
