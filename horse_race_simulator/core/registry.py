import itertools
import logging
import math
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from horse_race_simulator.core.generators import random_color, random_horse_name
from horse_race_simulator.core.state import Horse
from horse_race_simulator.core.types import HexColor

logger = logging.getLogger("horse_race.registry")

MIN_CONDITION = 80
MAX_CONDITION = 100

NameSource = Callable[[random.Random], str]
ColorSource = Callable[[random.Random], HexColor]


@dataclass
class HorseRegistry:
    """Creates the pool of competing horses."""

    rng: random.Random
    name_source: NameSource = field(default=random_horse_name)
    color_source: ColorSource = field(default=random_color)

    def generate(self, n: int) -> list[Horse]:
        horses: list[Horse] = []
        used_names: set[str] = set()

        for horse_id in range(max(n, 0)):
            condition = MIN_CONDITION + math.floor(
                self.rng.random() * (MAX_CONDITION - MIN_CONDITION + 1)
            )
            color = self.color_source(self.rng)
            name = self._unique_name(self.name_source(self.rng), used_names)
            used_names.add(name)
            horses.append(
                Horse(id=horse_id, name=name, color=color, condition=condition)
            )

        logger.debug("Generated %d horses", len(horses))
        return horses

    @staticmethod
    def _unique_name(name: str, used_names: set[str]) -> str:
        if name not in used_names:
            return name
        # used_names is finite, so a free suffix exists within len(used_names) + 1 tries.
        return next(
            candidate
            for candidate in (f"{name} {suffix}" for suffix in itertools.count(2))
            if candidate not in used_names
        )
