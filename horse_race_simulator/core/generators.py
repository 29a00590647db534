"""Random data sources consumed by the registry and the schedule generator."""

import math
import random
from collections.abc import Sequence

from horse_race_simulator.core.names import HORSE_ADJECTIVES, HORSE_NOUNS
from horse_race_simulator.core.types import HexColor

HEX_DIGITS = "0123456789ABCDEF"


def random_color(rng: random.Random) -> HexColor:
    """Return a color such as ``#3FA2C0``; one uniform draw per digit."""
    return "#" + "".join(
        HEX_DIGITS[math.floor(rng.random() * 16)] for _ in range(6)
    )


def _pick[T](rng: random.Random, options: Sequence[T]) -> T:
    return options[math.floor(rng.random() * len(options))]


def random_horse_name(rng: random.Random) -> str:
    """
    Return an "Adjective Noun" name.

    Collisions are possible; callers that need unique names within a batch
    must disambiguate themselves (see HorseRegistry).
    """
    return f"{_pick(rng, HORSE_ADJECTIVES)} {_pick(rng, HORSE_NOUNS)}"


def random_subset[T](rng: random.Random, pool: Sequence[T], k: int) -> list[T]:
    """Draw ``min(k, len(pool))`` distinct members of ``pool`` without replacement."""
    size = min(k, len(pool))
    if size <= 0:
        return []
    return rng.sample(list(pool), size)


def ordinal_suffix(n: int, uppercase: bool = False) -> str:
    # Only the literal teens are exceptions: 111 -> "st".
    if n in (11, 12, 13):
        suffix = "th"
    elif n > 0 and n % 10 == 1:
        suffix = "st"
    elif n > 0 and n % 10 == 2:
        suffix = "nd"
    elif n > 0 and n % 10 == 3:
        suffix = "rd"
    else:
        suffix = "th"
    return suffix.upper() if uppercase else suffix
