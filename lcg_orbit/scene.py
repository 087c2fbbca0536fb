"""Translate engine and layout output into drawable primitives."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .colors import step_color
from .config import VisualizerConfig, get_visualizer_config
from .engine import generate
from .layout import LayoutConfig, arrowhead, residue_points, trimmed_segment
from .logging_utils import debug_log_call
from .types import RGB, GenerationResult, LcgParameters, Point2D

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResidueMarker:
    value: int
    center: Point2D
    radius: float


@dataclass(frozen=True)
class DrawableEdge:
    """One arrow of the trajectory, already trimmed to the marker outlines."""

    step: int
    source: int
    target: int
    start: Point2D
    end: Point2D
    barbs: Tuple[Point2D, Point2D]
    color: RGB


@dataclass
class Scene:
    params: LcgParameters
    result: GenerationResult
    layout: LayoutConfig
    width: float
    height: float
    markers: List[ResidueMarker]
    cycle_marker: ResidueMarker
    config: VisualizerConfig = field(default_factory=get_visualizer_config)

    def edges(self) -> Iterator[DrawableEdge]:
        """Return a fresh iterator over the trajectory edges in generation order."""
        return iter_drawable_edges(self.result, self.markers, self.config)


def iter_drawable_edges(
    result: GenerationResult,
    markers: List[ResidueMarker],
    config: VisualizerConfig,
) -> Iterator[DrawableEdge]:
    values = result.values
    for step, source in enumerate(values):
        # The last edge closes onto the repeated value.
        target = values[step + 1] if step + 1 < len(values) else result.cycle.cycle_start
        start, end = trimmed_segment(
            markers[source].center, markers[target].center, config.marker_radius
        )
        yield DrawableEdge(
            step=step,
            source=source,
            target=target,
            start=start,
            end=end,
            barbs=arrowhead(start, end, length=config.arrow_length, spread=config.arrow_spread),
            color=step_color(
                step,
                config.base_color,
                config.palette_size,
                config.min_brightness,
                config.max_brightness,
            ),
        )


@debug_log_call(logger, log_result=False)
def build_scene(
    params: LcgParameters,
    width: float,
    height: float,
    config: Optional[VisualizerConfig] = None,
) -> Scene:
    config = config or get_visualizer_config()
    layout = LayoutConfig.for_canvas(
        width, height, fill=config.radius_fill, marker_radius=config.marker_radius
    )
    result = generate(params)

    points = residue_points(params.modulus, layout)
    markers = [
        ResidueMarker(value=value, center=Point2D(float(x), float(y)), radius=layout.marker_radius)
        for value, (x, y) in enumerate(points)
    ]
    cycle_marker = ResidueMarker(
        value=result.cycle.cycle_start,
        center=markers[result.cycle.cycle_start].center,
        radius=config.cycle_marker_radius,
    )
    logger.info(
        "Scene with %d marker(s) and %d edge(s) on %sx%s canvas",
        len(markers),
        len(result.trajectory),
        width,
        height,
    )
    return Scene(
        params=params,
        result=result,
        layout=layout,
        width=width,
        height=height,
        markers=markers,
        cycle_marker=cycle_marker,
        config=config,
    )
