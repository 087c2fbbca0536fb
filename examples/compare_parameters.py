"""Example pipeline: compare tail and cycle lengths of a few small generators."""

from lcg_orbit import generate_sequence, format_trajectory

CASES = [
    (16, 5, 3, 0),
    (16, 4, 3, 0),
    (10, 7, 7, 0),
    (12, 2, 1, 5),
    (9, -2, -1, -4),
]


def main() -> None:
    for modulus, multiplier, increment, seed in CASES:
        result = generate_sequence(modulus, multiplier, increment, seed)
        cycle = result.cycle
        full = "full period" if cycle.cycle_length == modulus else ""
        print(
            f"m={modulus:<3} a={multiplier:<3} c={increment:<3} seed={seed:<3} "
            f"tail={cycle.tail_length:<2} cycle={cycle.cycle_length:<3} {full}"
        )
        print(f"    {format_trajectory(result)}")


if __name__ == "__main__":
    main()
