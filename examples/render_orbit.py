"""Example pipeline: build an orbit scene and write it as a TikZ document."""

import logging
import sys
from pathlib import Path

from lcg_orbit import LcgParameters, build_scene, format_cycle_report, generate_tikz_document

logger = logging.getLogger(__name__)


def main(output: str = "orbit.tex") -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    params = LcgParameters(modulus=24, multiplier=5, increment=3, seed=7)
    scene = build_scene(params, 1000, 1000)
    print(format_cycle_report(scene.result.cycle))

    path = Path(output)
    path.write_text(generate_tikz_document(scene, title="m=24, a=5, c=3, seed=7"), encoding="utf-8")
    logger.info("Wrote %s", path)


if __name__ == "__main__":
    main(*sys.argv[1:2])
