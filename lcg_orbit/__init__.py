from .types import (
    LcgParameters,
    TrajectoryStep,
    CycleResult,
    GenerationResult,
    Point2D,
    ValidationError,
    InvalidModulus,
    ParameterRangeError,
    CycleNotFound,
    LayoutError,
)
from .engine import generate, generate_sequence, next_value, iter_trajectory, find_cycle_by_simulation
from .layout import (
    LayoutConfig,
    angle_for_residue,
    point_for_residue,
    residue_points,
    edge_point,
    trimmed_segment,
    arrowhead,
)
from .colors import brightness_ratio, parse_hex_color, scale_color, step_palette, step_color, to_hex
from .config import VisualizerConfig, get_visualizer_config, set_visualizer_config
from .scene import Scene, ResidueMarker, DrawableEdge, build_scene
from .animation import play_edges
from .validate import parse_parameters
from .printer import format_trajectory, format_cycle_report
from .tikz_codegen import generate_tikz_code, generate_tikz_document, latex_escape

__all__ = [
    'LcgParameters',
    'TrajectoryStep',
    'CycleResult',
    'GenerationResult',
    'Point2D',
    'ValidationError',
    'InvalidModulus',
    'ParameterRangeError',
    'CycleNotFound',
    'LayoutError',
    'generate',
    'generate_sequence',
    'next_value',
    'iter_trajectory',
    'find_cycle_by_simulation',
    'LayoutConfig',
    'angle_for_residue',
    'point_for_residue',
    'residue_points',
    'edge_point',
    'trimmed_segment',
    'arrowhead',
    'brightness_ratio',
    'parse_hex_color',
    'scale_color',
    'step_palette',
    'step_color',
    'to_hex',
    'VisualizerConfig',
    'get_visualizer_config',
    'set_visualizer_config',
    'Scene',
    'ResidueMarker',
    'DrawableEdge',
    'build_scene',
    'play_edges',
    'parse_parameters',
    'format_trajectory',
    'format_cycle_report',
    'generate_tikz_code',
    'generate_tikz_document',
    'latex_escape',
]
