import random
import re
from unittest.mock import MagicMock

import pytest

from horse_race_simulator.core.generators import (
    ordinal_suffix,
    random_color,
    random_horse_name,
    random_subset,
)
from horse_race_simulator.core.names import HORSE_ADJECTIVES, HORSE_NOUNS

HEX_COLOR = re.compile(r"^#[0-9A-F]{6}$")


def fixed_rng(*values: float) -> MagicMock:
    rng = MagicMock()
    if len(values) == 1:
        rng.random.return_value = values[0]
    else:
        rng.random.side_effect = list(values)
    return rng


def test_random_color_format():
    rng = random.Random(7)
    colors = [random_color(rng) for _ in range(200)]
    assert all(HEX_COLOR.match(c) for c in colors)
    assert len(set(colors)) > 100


@pytest.mark.parametrize(
    ("draw", "expected"),
    [(0.0, "#000000"), (0.5, "#888888"), (0.9999, "#FFFFFF")],
)
def test_random_color_uses_one_draw_per_digit(draw: float, expected: str):
    rng = fixed_rng(draw)
    assert random_color(rng) == expected
    assert rng.random.call_count == 6


def test_random_horse_name_picks_adjective_then_noun():
    assert random_horse_name(fixed_rng(0.0)) == "Swift Thunder"
    assert random_horse_name(fixed_rng(0.99)) == "Ancient Dream"
    # floor(0.25 * 24) = 6, floor(0.5 * 24) = 12
    assert random_horse_name(fixed_rng(0.25, 0.5)) == "Royal Warrior"


def test_random_horse_name_uses_word_lists():
    rng = random.Random(3)
    for _ in range(50):
        adjective, noun = random_horse_name(rng).split(" ")
        assert adjective in HORSE_ADJECTIVES
        assert noun in HORSE_NOUNS


@pytest.mark.parametrize("words", [HORSE_ADJECTIVES, HORSE_NOUNS])
def test_word_lists_are_unique_capitalized_words(words: tuple[str, ...]):
    assert len(words) == 24
    assert len(set(words)) == len(words)
    for word in words:
        assert word == word.strip()
        assert " " not in word
        assert word[0].isupper()
        assert word[1:] == word[1:].lower()


def test_random_subset_draws_distinct_members():
    pool = list(range(20))
    rng = random.Random(11)
    for _ in range(20):
        subset = random_subset(rng, pool, 10)
        assert len(subset) == 10
        assert len(set(subset)) == 10
        assert set(subset) <= set(pool)


def test_random_subset_limits():
    rng = random.Random(5)
    pool = ["a", "b", "c"]

    assert random_subset(rng, pool, 0) == []
    assert random_subset(rng, pool, -2) == []
    assert random_subset(rng, [], 4) == []
    assert sorted(random_subset(rng, pool, 3)) == pool
    assert sorted(random_subset(rng, pool, 10)) == pool


def test_random_subset_does_not_mutate_pool():
    pool = [1, 2, 3, 4, 5]
    random_subset(random.Random(1), pool, 3)
    assert pool == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (1, "st"),
        (2, "nd"),
        (3, "rd"),
        (4, "th"),
        (10, "th"),
        (11, "th"),
        (12, "th"),
        (13, "th"),
        (21, "st"),
        (22, "nd"),
        (23, "rd"),
        (101, "st"),
        (111, "st"),
        (112, "nd"),
        (113, "rd"),
        (1011, "st"),
        (0, "th"),
        (-1, "th"),
        (-2, "th"),
        (-11, "th"),
    ],
)
def test_ordinal_suffix(n: int, expected: str):
    assert ordinal_suffix(n) == expected


def test_ordinal_suffix_uppercase():
    assert [ordinal_suffix(n, True) for n in (1, 2, 3, 4, 11, 21, 0)] == [
        "ST",
        "ND",
        "RD",
        "TH",
        "TH",
        "ST",
        "TH",
    ]
    assert ordinal_suffix(1, False) == "st"
