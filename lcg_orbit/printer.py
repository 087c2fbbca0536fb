from typing import List

from .types import CycleResult, GenerationResult


def format_trajectory(result: GenerationResult, *, max_values: int = 0) -> str:
    """Render ``result`` as ``0 -> 1 -> 2 -> (0)``.

    With ``max_values`` > 0 the middle of long trajectories is elided.
    """

    values = [str(value) for value in result.values]
    if max_values > 0 and len(values) > max_values:
        head = max_values // 2
        tail = max_values - head
        values = values[:head] + ["..."] + values[len(values) - tail :]
    values.append(f"({result.cycle.cycle_start})")
    return " -> ".join(values)


def format_cycle_report(cycle: CycleResult) -> str:
    lines: List[str] = [
        "Random sequence cycle found!",
        f"Cycle start value: {cycle.cycle_start}",
        f"Cycle length: {cycle.cycle_length}",
        f"Pre-cycle length: {cycle.tail_length}",
    ]
    return "\n".join(lines)
