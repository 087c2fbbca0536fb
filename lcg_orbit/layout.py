"""Circular placement of residues and marker-aware edge trimming."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import get_visualizer_config
from .types import InvalidModulus, LayoutError, Point2D

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutConfig:
    center_x: float
    center_y: float
    radius: float
    marker_radius: float = 20.0

    @property
    def center(self) -> Point2D:
        return Point2D(self.center_x, self.center_y)

    @classmethod
    def for_canvas(
        cls,
        width: float,
        height: float,
        *,
        fill: Optional[float] = None,
        marker_radius: Optional[float] = None,
    ) -> "LayoutConfig":
        """Center the circle on a ``width`` x ``height`` canvas.

        ``fill`` and ``marker_radius`` default to the current visualizer config.
        """

        if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
            raise LayoutError("Cannot determine canvas size.")
        config = get_visualizer_config()
        fill = config.radius_fill if fill is None else fill
        marker_radius = config.marker_radius if marker_radius is None else marker_radius
        center_x = width / 2
        center_y = height / 2
        radius = min(center_x, center_y) * fill
        logger.debug(
            "Layout for %sx%s canvas: center=(%s, %s) radius=%s", width, height, center_x, center_y, radius
        )
        return cls(center_x=center_x, center_y=center_y, radius=radius, marker_radius=marker_radius)


def _check_modulus(modulus: int) -> None:
    if modulus <= 0:
        raise InvalidModulus("Modulus (m) must be a positive integer.")


def angle_for_residue(value: int, modulus: int) -> float:
    # -pi/2 puts residue 0 at twelve o'clock; y grows downwards so angles run clockwise.
    _check_modulus(modulus)
    return value / modulus * 2 * math.pi - math.pi / 2


def point_for_residue(value: int, modulus: int, config: LayoutConfig) -> Point2D:
    _check_modulus(modulus)
    if not 0 <= value < modulus:
        raise ValueError(f"residue {value} outside [0, {modulus})")
    angle = angle_for_residue(value, modulus)
    return Point2D(
        config.center_x + config.radius * math.cos(angle),
        config.center_y + config.radius * math.sin(angle),
    )


def residue_points(modulus: int, config: LayoutConfig) -> np.ndarray:
    """Return an ``(modulus, 2)`` array with the position of every residue."""

    _check_modulus(modulus)
    angles = np.arange(modulus, dtype=float) / modulus * 2 * np.pi - np.pi / 2
    xs = config.center_x + config.radius * np.cos(angles)
    ys = config.center_y + config.radius * np.sin(angles)
    return np.column_stack((xs, ys))


def edge_point(marker_center: Point2D, towards: Point2D, marker_radius: float) -> Point2D:
    """Point on the marker circle around ``marker_center`` facing ``towards``."""

    dx = towards[0] - marker_center[0]
    dy = towards[1] - marker_center[1]
    distance = math.hypot(dx, dy)
    if distance == 0:
        return Point2D(float(marker_center[0]), float(marker_center[1]))
    return Point2D(
        marker_center[0] + dx / distance * marker_radius,
        marker_center[1] + dy / distance * marker_radius,
    )


def trimmed_segment(
    start_center: Point2D, end_center: Point2D, marker_radius: float
) -> Tuple[Point2D, Point2D]:
    return (
        edge_point(start_center, end_center, marker_radius),
        edge_point(end_center, start_center, marker_radius),
    )


def arrowhead(
    start: Point2D,
    end: Point2D,
    *,
    length: float = 15.0,
    spread: float = math.pi / 6,
) -> Tuple[Point2D, Point2D]:
    """Return the two barb endpoints of an arrowhead drawn at ``end``."""

    angle = math.atan2(end[1] - start[1], end[0] - start[0])
    left = Point2D(
        end[0] - length * math.cos(angle + spread),
        end[1] - length * math.sin(angle + spread),
    )
    right = Point2D(
        end[0] - length * math.cos(angle - spread),
        end[1] - length * math.sin(angle - spread),
    )
    return left, right
