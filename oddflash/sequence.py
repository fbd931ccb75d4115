"""Oddball stimulus sequences: mostly standard images with isolated deviants."""

from __future__ import annotations

import enum
import random

STANDARD_FRACTION = 0.8
LEADING_STANDARDS = 2


class Stimulus(enum.IntEnum):
    """The image shown on one flash."""

    STANDARD = 0
    DEVIANT = 1


def make_sequence(max_flashes: int, rng: random.Random | None = None) -> list[Stimulus]:
    """Build a sequence of ``max_flashes`` stimuli.

    About a fifth of the flashes are deviants. The first two flashes are always
    standard and no two deviants are adjacent; if there is no room left for
    another deviant, fewer are placed.
    """
    rng = rng if rng is not None else random.Random()
    standard_count = int(max_flashes * STANDARD_FRACTION)
    needed = max_flashes - standard_count

    sequence = [Stimulus.STANDARD] * max(max_flashes, 0)
    available = list(range(LEADING_STANDARDS, max_flashes))

    while needed > 0 and available:
        pos = available.pop(rng.randrange(len(available)))
        sequence[pos] = Stimulus.DEVIANT
        for neighbour in (pos - 1, pos + 1):
            if neighbour in available:
                available.remove(neighbour)
        needed -= 1

    return sequence