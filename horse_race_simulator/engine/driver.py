from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from horse_race_simulator.engine.race_engine import RaceEngine

logger = logging.getLogger("horse_race.driver")


@dataclass
class TickDriver:
    """
    Host loop that calls ``engine.tick()`` while the race is in progress.

    The loop re-checks the status before every call, so pausing, finishing
    or reinitializing the engine stops it. In realtime mode consecutive ticks
    are at least ``1 / tick_rate`` seconds apart.
    """

    tick_rate: float = 60.0
    realtime: bool = False
    max_ticks: int | None = None
    clock: Callable[[], float] = field(default=time.monotonic)
    sleep: Callable[[float], None] = field(default=time.sleep)

    @property
    def interval(self) -> float:
        return 1.0 / self.tick_rate

    def run(self, engine: RaceEngine) -> int:
        ticks = 0
        last_tick = self.clock()

        while engine.status == "in_progress":
            if self.max_ticks is not None and ticks >= self.max_ticks:
                logger.warning(
                    "Tick budget of %d exhausted; pausing the race", self.max_ticks
                )
                engine.set_status("paused")
                break

            if self.realtime:
                remaining = self.interval - (self.clock() - last_tick)
                if remaining > 0:
                    self.sleep(remaining)
                last_tick = self.clock()

            engine.tick()
            ticks += 1

        return ticks
