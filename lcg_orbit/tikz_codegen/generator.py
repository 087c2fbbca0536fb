"""TikZ renderer for LCG orbit scenes."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

from .utils import latex_escape
from ..printer import format_cycle_report
from ..scene import Scene
from ..types import RGB, Point2D

PT_PER_CM = 28.3464567
DEFAULT_UNIT_CM = 0.02
LABEL_FONT_PX = 20.0
TITLE_GAP_PX = 12.0

standalone_tpl = r"""\documentclass[border=4pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
%% optional layers
\pgfdeclarelayer{bg}\pgfdeclarelayer{fg}\pgfsetlayers{bg,main,fg}
\begin{document}
%s
\end{document}
"""


def generate_tikz_document(
    scene: Scene,
    *,
    title: Optional[str] = None,
    include_report: bool = True,
    unit_cm: float = DEFAULT_UNIT_CM,
) -> str:
    """Render a standalone LaTeX document holding the scene picture."""

    tikz_code = generate_tikz_code(
        scene, title=title, include_report=include_report, unit_cm=unit_cm
    )
    return standalone_tpl % tikz_code


def generate_tikz_code(
    scene: Scene,
    *,
    title: Optional[str] = None,
    include_report: bool = False,
    unit_cm: float = DEFAULT_UNIT_CM,
) -> str:
    """Generate a ``tikzpicture`` for ``scene``.

    Scene coordinates are screen pixels with y pointing down; they are scaled by
    ``unit_cm`` and flipped so the picture matches the on-screen layout.
    """

    if not isinstance(scene, Scene):
        raise TypeError("scene must be an instance of Scene")
    if unit_cm <= 0:
        raise ValueError(f"unit_cm must be positive (got {unit_cm})")

    config = scene.config
    px_pt = unit_cm * PT_PER_CM

    def coord(point: Point2D) -> str:
        return f"({_format_float(point[0] * unit_cm)},{_format_float((scene.height - point[1]) * unit_cm)})"

    def length(value: float) -> str:
        return f"{_format_float(value * unit_cm)}cm"

    edges = list(scene.edges())
    color_names = _edge_color_names([edge.color for edge in edges])

    lines: List[str] = []
    lines.append(_define_color("lcgcanvas", config.canvas_fill))
    lines.append(_define_color("lcgmarkerfill", config.marker_fill))
    lines.append(_define_color("lcgmarkerstroke", config.marker_stroke))
    lines.append(_define_color("lcgcycle", config.cycle_marker_color))
    for color, name in color_names.items():
        lines.append(_define_color(name, color))

    font_pt = LABEL_FONT_PX * px_pt
    lines.append("\\begin{tikzpicture}[")
    lines.append("  canvas/.style={fill=lcgcanvas},")
    lines.append(
        "  marker/.style={draw=lcgmarkerstroke, fill=lcgmarkerfill, "
        f"line width={_format_float(config.marker_stroke_width * px_pt)}pt}},"
    )
    lines.append(
        "  residue label/.style={text=white, inner sep=0pt, "
        f"font=\\fontsize{{{_format_float(font_pt)}}}{{{_format_float(font_pt * 1.2)}}}\\selectfont\\bfseries}},"
    )
    lines.append(
        f"  edge/.style={{line width={_format_float(config.edge_width * px_pt)}pt, line cap=round}},"
    )
    lines.append(
        f"  cycle marker/.style={{draw=lcgcycle, line width={_format_float(config.cycle_marker_width * px_pt)}pt}},"
    )
    lines.append("]")

    lines.append("\\begin{pgfonlayer}{bg}")
    lines.append(
        f"  \\fill[canvas] (0,0) rectangle ({_format_float(scene.width * unit_cm)},{_format_float(scene.height * unit_cm)});"
    )
    lines.append("\\end{pgfonlayer}")

    lines.append("\\begin{pgfonlayer}{main}")
    for marker in scene.markers:
        lines.append(f"  \\filldraw[marker] {coord(marker.center)} circle[radius={length(marker.radius)}];")
        lines.append(f"  \\node[residue label] at {coord(marker.center)} {{{marker.value}}};")
    for edge in edges:
        style = f"edge, draw={color_names[edge.color]}"
        lines.append(f"  \\draw[{style}] {coord(edge.start)} -- {coord(edge.end)};")
        left, right = edge.barbs
        lines.append(f"  \\draw[{style}] {coord(edge.end)} -- {coord(left)};")
        lines.append(f"  \\draw[{style}] {coord(edge.end)} -- {coord(right)};")
    lines.append("\\end{pgfonlayer}")

    lines.append("\\begin{pgfonlayer}{fg}")
    ring = scene.cycle_marker
    lines.append(f"  \\draw[cycle marker] {coord(ring.center)} circle[radius={length(ring.radius)}];")
    lines.append("\\end{pgfonlayer}")

    if title:
        top = (scene.height + TITLE_GAP_PX) * unit_cm
        lines.append(
            f"\\node[anchor=south west, font=\\bfseries] at (0,{_format_float(top)}) {{{latex_escape(title.strip())}}};"
        )
    if include_report:
        report = r" \\ ".join(latex_escape(line) for line in format_cycle_report(scene.result.cycle).splitlines())
        lines.append(
            f"\\node[anchor=north west, align=left, font=\\footnotesize] at (0,{_format_float(-TITLE_GAP_PX * unit_cm)}) {{{report}}};"
        )

    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def _edge_color_names(colors: List[RGB]) -> Dict[RGB, str]:
    names: Dict[RGB, str] = {}
    for color in colors:
        if color not in names:
            names[color] = f"lcgstep{len(names) + 1}"
    return names


def _define_color(name: str, color: Tuple[int, int, int]) -> str:
    r, g, b = color
    return f"\\definecolor{{{name}}}{{RGB}}{{{r},{g},{b}}}"


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted
