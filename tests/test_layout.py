import math

import numpy as np
import pytest

from lcg_orbit import (
    InvalidModulus,
    LayoutConfig,
    LayoutError,
    Point2D,
    VisualizerConfig,
    angle_for_residue,
    arrowhead,
    edge_point,
    get_visualizer_config,
    point_for_residue,
    residue_points,
    set_visualizer_config,
    trimmed_segment,
)


def config():
    return LayoutConfig(center_x=400.0, center_y=300.0, radius=240.0)


@pytest.mark.parametrize('modulus', [1, 2, 5, 12, 1000])
def test_residue_zero_is_at_the_top(modulus):
    point = point_for_residue(0, modulus, config())

    assert point.x == pytest.approx(400.0)
    assert point.y == pytest.approx(60.0)


def test_quarter_turns_run_clockwise_on_screen():
    cfg = config()

    assert point_for_residue(1, 4, cfg) == pytest.approx((640.0, 300.0))
    assert point_for_residue(2, 4, cfg) == pytest.approx((400.0, 540.0))
    assert point_for_residue(3, 4, cfg) == pytest.approx((160.0, 300.0))


@pytest.mark.parametrize('modulus', [1, 3, 7, 64])
def test_angle_step_is_uniform(modulus):
    step = 2 * math.pi / modulus
    angles = [angle_for_residue(value, modulus) for value in range(modulus + 1)]

    for first, second in zip(angles, angles[1:]):
        assert second - first == pytest.approx(step)
    wrapped = (angles[0] + modulus * step - angles[0]) % (2 * math.pi)
    assert min(wrapped, 2 * math.pi - wrapped) == pytest.approx(0.0, abs=1e-9)


def test_residue_points_match_single_placement():
    cfg = config()
    points = residue_points(9, cfg)

    assert points.shape == (9, 2)
    for value in range(9):
        np.testing.assert_allclose(points[value], point_for_residue(value, 9, cfg))


@pytest.mark.parametrize('value', [-1, 5, 6])
def test_point_for_residue_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        point_for_residue(value, 5, config())


def test_point_for_residue_rejects_bad_modulus():
    with pytest.raises(InvalidModulus):
        point_for_residue(0, 0, config())
    with pytest.raises(InvalidModulus):
        residue_points(-2, config())


def test_layout_for_canvas():
    cfg = LayoutConfig.for_canvas(800, 600)

    assert cfg.center == Point2D(400.0, 300.0)
    assert cfg.radius == pytest.approx(240.0)
    assert cfg.marker_radius == 20.0


@pytest.mark.parametrize(
    'width, height',
    [(0, 600), (800, 0), (-1, -1), (math.inf, 600), (800, math.inf), (math.nan, 600), (800, math.nan)],
)
def test_layout_for_unusable_canvas(width, height):
    with pytest.raises(LayoutError) as exc:
        LayoutConfig.for_canvas(width, height)

    assert 'Cannot determine canvas size.' in str(exc.value)


def test_edge_point_lies_on_marker_circle():
    center = Point2D(10.0, 10.0)

    assert edge_point(center, Point2D(30.0, 10.0), 5.0) == pytest.approx((15.0, 10.0))
    trimmed = edge_point(center, Point2D(13.0, 14.0), 5.0)
    assert trimmed == pytest.approx((13.0, 14.0))
    assert math.hypot(trimmed.x - center.x, trimmed.y - center.y) == pytest.approx(5.0)


@pytest.mark.parametrize('point', [Point2D(0.0, 0.0), Point2D(-3.5, 12.25)])
def test_edge_point_degenerate_returns_center(point):
    assert edge_point(point, point, 20.0) == point


def test_trimmed_segment_uses_opposite_directions():
    start, end = trimmed_segment(Point2D(0.0, 0.0), Point2D(100.0, 0.0), 20.0)

    assert start == pytest.approx((20.0, 0.0))
    assert end == pytest.approx((80.0, 0.0))


def test_arrowhead_barbs():
    left, right = arrowhead(Point2D(0.0, 0.0), Point2D(10.0, 0.0))
    back = 15.0 * math.cos(math.pi / 6)

    assert left == pytest.approx((10.0 - back, -7.5))
    assert right == pytest.approx((10.0 - back, 7.5))


def test_layout_for_canvas_follows_visualizer_config():
    original = get_visualizer_config()
    try:
        set_visualizer_config(VisualizerConfig(marker_radius=8.0, radius_fill=0.5))
        cfg = LayoutConfig.for_canvas(800, 600)
    finally:
        set_visualizer_config(original)

    assert cfg.marker_radius == 8.0
    assert cfg.radius == pytest.approx(150.0)
