import pytest

import lcg_orbit.engine as engine
from lcg_orbit import (
    CycleNotFound,
    CycleResult,
    InvalidModulus,
    LcgParameters,
    find_cycle_by_simulation,
    generate,
    generate_sequence,
    iter_trajectory,
    next_value,
)


def params(m, a, c, seed):
    return LcgParameters(modulus=m, multiplier=a, increment=c, seed=seed)


def test_full_period_generator():
    result = generate(params(5, 1, 1, 0))

    assert result.values == (0, 1, 2, 3, 4)
    assert result.cycle == CycleResult(tail_length=0, cycle_start=0, cycle_length=5)
    assert [step.index for step in result.trajectory] == [0, 1, 2, 3, 4]


def test_modulus_one_repeats_immediately():
    result = generate(params(1, 3, 7, 42))

    assert result.values == (0,)
    assert result.cycle.tail_length == 0
    assert result.cycle.cycle_length == 1
    assert result.cycle.cycle_start == 0


def test_hand_computed_trajectory():
    # 0 -> 7 -> 56 % 10 = 6 -> 49 % 10 = 9 -> 70 % 10 = 0
    result = generate_sequence(10, 7, 7, 0)

    assert result.values == (0, 7, 6, 9)
    assert result.cycle == CycleResult(tail_length=0, cycle_start=0, cycle_length=4)


@pytest.mark.parametrize(
    'm, a, c, seed, values, tail, cycle_start, cycle_length',
    [
        (8, 2, 0, 1, (1, 2, 4, 0), 3, 0, 1),
        (10, 2, 1, 0, (0, 1, 3, 7, 5), 1, 1, 4),
    ],
)
def test_trajectories_with_tail(m, a, c, seed, values, tail, cycle_start, cycle_length):
    result = generate(params(m, a, c, seed))

    assert result.values == values
    assert result.cycle == CycleResult(tail, cycle_start, cycle_length)
    assert result.tail_values == values[:tail]
    assert result.cycle_values == values[tail:]


def test_negative_seed_is_normalized():
    p = params(5, 1, 1, -3)

    assert p.normalized_seed == 2
    assert generate(p).values == (2, 3, 4, 0, 1)


def test_negative_multiplier_and_increment_stay_in_range():
    result = generate(params(5, -1, -1, 0))

    assert result.values == (0, 4)
    assert result.cycle == CycleResult(tail_length=0, cycle_start=0, cycle_length=2)
    assert next_value(0, params(5, -1, -1, 0)) == 4


@pytest.mark.parametrize('m', [1, 2, 7, 16, 30, 97])
@pytest.mark.parametrize('a, c, seed', [(1, 1, 0), (5, 3, 11), (-7, 2, -13), (0, 4, 3), (6, -9, 100)])
def test_detection_matches_direct_simulation(m, a, c, seed):
    p = params(m, a, c, seed)
    result = generate(p)

    assert result.cycle == find_cycle_by_simulation(p)
    assert all(0 <= value < m for value in result.values)
    assert result.repeat_index <= 2 * m
    assert len(set(result.values)) == len(result.values)
    # the cycle starts at the value recorded at index tail_length
    assert result.values[result.cycle.tail_length] == result.cycle.cycle_start
    assert result.cycle.tail_length + result.cycle.cycle_length == result.repeat_index


def test_generate_is_repeatable():
    p = params(97, 23, 5, 17)

    assert generate(p) == generate(p)


def test_iter_trajectory_follows_recurrence():
    p = params(10, 7, 7, 0)

    assert list(iter_trajectory(p, limit=6)) == [0, 7, 6, 9, 0, 7]
    assert len(list(iter_trajectory(p))) == 11

    with pytest.raises(ValueError):
        list(iter_trajectory(p, limit=-1))


@pytest.mark.parametrize('modulus', [0, -5])
def test_invalid_modulus_is_rejected(modulus):
    with pytest.raises(InvalidModulus):
        generate_sequence(modulus, 1, 1, 0)


def test_cycle_not_found_when_bound_exceeded(monkeypatch):
    monkeypatch.setattr(engine, "next_value", lambda current, p: current + 1)

    with pytest.raises(CycleNotFound) as exc:
        engine.generate(params(4, 1, 1, 0))

    assert 'Unable to find cycle' in str(exc.value)
