import random

import pytest

from oddflash.sequence import Stimulus, make_sequence


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("count", [10, 120])
def test_sequence_invariants(seed, count):
    seq = make_sequence(count, random.Random(seed))
    assert len(seq) == count
    assert seq[0] is Stimulus.STANDARD
    assert seq[1] is Stimulus.STANDARD
    for a, b in zip(seq, seq[1:]):
        assert not (a is Stimulus.DEVIANT and b is Stimulus.DEVIANT)
    deviants = seq.count(Stimulus.DEVIANT)
    assert deviants == count - int(count * 0.8)


def test_same_seed_same_sequence():
    first = make_sequence(120, random.Random(7))
    second = make_sequence(120, random.Random(7))
    assert len(first) == 120
    assert first.count(Stimulus.DEVIANT) == 24
    assert first == second


def test_empty_sequence():
    assert make_sequence(0, random.Random(1)) == []


def test_too_short_for_deviants():
    assert make_sequence(1, random.Random(1)) == [Stimulus.STANDARD]
    assert make_sequence(2, random.Random(1)) == [Stimulus.STANDARD, Stimulus.STANDARD]


def test_single_slot_for_deviant():
    assert make_sequence(3, random.Random(3)) == [
        Stimulus.STANDARD,
        Stimulus.STANDARD,
        Stimulus.DEVIANT,
    ]


def test_default_rng_keeps_invariants():
    seq = make_sequence(50)
    assert len(seq) == 50
    assert seq[:2] == [Stimulus.STANDARD, Stimulus.STANDARD]
    assert seq.count(Stimulus.DEVIANT) == 50 - int(50 * 0.8)


def test_sequence_items_compare_as_image_indices():
    seq = make_sequence(3, random.Random(3))
    assert [int(item) for item in seq] == [0, 0, 1]