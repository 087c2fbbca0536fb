"""Trajectory generation and cycle detection for linear congruential generators."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from .logging_utils import apply_debug_logging
from .types import (
    CycleNotFound,
    CycleResult,
    GenerationResult,
    InvalidModulus,
    LcgParameters,
    TrajectoryStep,
)

logger = logging.getLogger(__name__)


def next_value(current: int, params: LcgParameters) -> int:
    """Advance the recurrence by one step; the result is always in ``[0, modulus)``."""

    return (params.multiplier * current + params.increment) % params.modulus


def iter_trajectory(params: LcgParameters, limit: Optional[int] = None) -> Iterator[int]:
    """Yield the raw recurrence starting at the normalized seed.

    No cycle detection happens here. ``limit`` defaults to ``modulus + 1`` values,
    which always covers at least one repeat.
    """

    count = params.modulus + 1 if limit is None else limit
    if count < 0:
        raise ValueError(f"limit must be non-negative (got {count})")
    current = params.normalized_seed
    for _ in range(count):
        yield current
        current = next_value(current, params)


def generate(params: LcgParameters) -> GenerationResult:
    """Run the recurrence until a residue repeats.

    Returns every distinct residue visited before the repeat, in generation
    order, together with the tail and cycle lengths. Raises ``CycleNotFound`` if
    more than ``2 * modulus`` steps pass without a repeat.
    """

    if params.modulus <= 0:
        raise InvalidModulus("Modulus (m) must be a positive integer.")

    current = params.normalized_seed
    history: Dict[int, int] = {}
    step = 0
    bound = 2 * params.modulus

    while current not in history:
        history[current] = step
        current = next_value(current, params)
        step += 1
        if step > bound:
            logger.warning(
                "No repeat after %d steps for m=%d a=%d c=%d",
                step,
                params.modulus,
                params.multiplier,
                params.increment,
            )
            raise CycleNotFound(
                "Unable to find cycle after too many steps. Please check parameters."
            )

    tail_length = history[current]
    cycle = CycleResult(
        tail_length=tail_length,
        cycle_start=current,
        cycle_length=step - tail_length,
    )
    trajectory = tuple(TrajectoryStep(index=index, value=value) for value, index in history.items())
    logger.info(
        "Cycle found: start=%d length=%d tail=%d (m=%d)",
        cycle.cycle_start,
        cycle.cycle_length,
        cycle.tail_length,
        params.modulus,
    )
    return GenerationResult(params=params, trajectory=trajectory, cycle=cycle)


def generate_sequence(modulus: int, multiplier: int, increment: int, seed: int) -> GenerationResult:
    return generate(
        LcgParameters(modulus=modulus, multiplier=multiplier, increment=increment, seed=seed)
    )


def find_cycle_by_simulation(params: LcgParameters) -> CycleResult:
    """Locate the cycle by brute-force list search over :func:`iter_trajectory`."""

    seen: List[int] = []
    for value in iter_trajectory(params):
        if value in seen:
            tail_length = seen.index(value)
            return CycleResult(
                tail_length=tail_length,
                cycle_start=value,
                cycle_length=len(seen) - tail_length,
            )
        seen.append(value)
    raise CycleNotFound("Unable to find cycle after too many steps. Please check parameters.")


apply_debug_logging(globals(), logger=logger, skip={"next_value"})
