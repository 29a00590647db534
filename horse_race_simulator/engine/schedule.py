import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from horse_race_simulator.core.generators import random_subset
from horse_race_simulator.core.state import Horse, ScheduleEntry

logger = logging.getLogger("horse_race.schedule")

BASE_DISTANCE = 1200
DISTANCE_STEP = 200

SubsetSource = Callable[[random.Random, Sequence[Horse], int], list[Horse]]


def round_distance(round_number: int) -> int:
    """Distance in meters of a 1-based round under the standard policy."""
    return BASE_DISTANCE + DISTANCE_STEP * (round_number - 1)


@dataclass
class ScheduleGenerator:
    """Splits a horse pool into rounds of increasing distance."""

    rng: random.Random
    subset_source: SubsetSource = field(default=random_subset)

    def initialize(
        self,
        round_count: int,
        horse_pool: Sequence[Horse],
        participants_per_round: int,
    ) -> list[ScheduleEntry]:
        # Each round draws independently; a horse may run in several rounds.
        schedule = [
            ScheduleEntry(
                round=round_number,
                distance=round_distance(round_number),
                participants=tuple(
                    self.subset_source(self.rng, horse_pool, participants_per_round)
                ),
            )
            for round_number in range(1, round_count + 1)
        ]
        logger.debug(
            "Scheduled %d rounds from a pool of %d horses",
            len(schedule),
            len(horse_pool),
        )
        return schedule
