import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from lcg_orbit import (
    CycleNotFound,
    DrawableEdge,
    LayoutError,
    ValidationError,
    build_scene,
    format_cycle_report,
    format_trajectory,
    generate_tikz_document,
    get_visualizer_config,
    parse_parameters,
    play_edges,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _print_edge(edge: DrawableEdge) -> None:
    print(
        f"  step {edge.step}: {edge.source} -> {edge.target} "
        f"({edge.start.x:.1f}, {edge.start.y:.1f}) -> ({edge.end.x:.1f}, {edge.end.y:.1f})"
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    config = get_visualizer_config()

    parser = argparse.ArgumentParser(description="Visualize the orbit of a linear congruential generator")
    parser.add_argument("modulus", help="Modulus m (positive integer)")
    parser.add_argument("multiplier", help="Multiplier a")
    parser.add_argument("increment", help="Increment c")
    parser.add_argument("seed", help="Seed X0")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=1280.0,
        help="Canvas width in pixels (default: 1280)",
    )
    parser.add_argument(
        "--height",
        type=float,
        default=720.0,
        help="Canvas height in pixels (default: 720)",
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Print every edge, pausing between steps",
    )
    parser.add_argument(
        "--delay-ms",
        type=float,
        default=config.step_delay_ms,
        help=f"Pause between animated steps in milliseconds (default: {config.step_delay_ms:g})",
    )
    parser.add_argument(
        "--max-values",
        type=int,
        default=64,
        help="Elide the printed trajectory beyond this many values, 0 prints all (default: 64)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the orbit to the given path",
    )
    parser.add_argument(
        "--title",
        help="Title placed above the TikZ picture",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        params = parse_parameters(args.modulus, args.multiplier, args.increment, args.seed)
    except ValidationError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    logger.info(
        "Visualizing m=%d a=%d c=%d seed=%d (normalized %d)",
        params.modulus,
        params.multiplier,
        params.increment,
        params.seed,
        params.normalized_seed,
    )

    try:
        scene = build_scene(params, args.width, args.height, config)
    except (CycleNotFound, LayoutError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    print(f"Trajectory: {format_trajectory(scene.result, max_values=args.max_values)}")

    if args.animate:
        print("Edges:")
        play_edges(scene.edges(), _print_edge, delay_ms=args.delay_ms)

    print(format_cycle_report(scene.result.cycle))

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        tikz_document = generate_tikz_document(scene, title=args.title)
        output_path.write_text(tikz_document, encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
