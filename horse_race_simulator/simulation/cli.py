"""Command-line interface for running a race program."""

import logging
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import cappa
import msgspec
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from horse_race_simulator.core.formatting import position_text, result_heading
from horse_race_simulator.core.state import RaceResult
from horse_race_simulator.engine.controls import press_start
from horse_race_simulator.engine.driver import TickDriver
from horse_race_simulator.engine.logging import configure_logging
from horse_race_simulator.engine.race_engine import RaceEngine
from horse_race_simulator.simulation.config import RaceConfig
from horse_race_simulator.simulation.telemetry import StandingsAggregator

logger = logging.getLogger("horse_race.cli")


@dataclass
class Args:
    """Run a full horse race program in the terminal."""

    config: Annotated[Path | None, cappa.Arg(long=True)] = None
    """Path to TOML configuration file"""

    seed: Annotated[int | None, cappa.Arg(long=True)] = None
    """Override: RNG seed"""

    horses: Annotated[int | None, cappa.Arg(long=True)] = None
    """Override: number of horses in the pool"""

    rounds: Annotated[int | None, cappa.Arg(long=True)] = None
    """Override: number of rounds in the program"""

    participants: Annotated[int | None, cappa.Arg(long=True)] = None
    """Override: horses per round"""

    tick_rate: Annotated[float | None, cappa.Arg(long=True)] = None
    """Override: driver ticks per second"""

    realtime: Annotated[bool, cappa.Arg(long=True)] = False
    """Pace ticks at the tick rate instead of running flat out"""

    verbose: Annotated[bool, cappa.Arg(short=True, long=True)] = False
    """Show engine logs"""

    def load_config(self) -> RaceConfig:
        config = (
            RaceConfig.from_toml(self.config) if self.config is not None else RaceConfig()
        )
        overrides: dict[str, Any] = {
            "seed": self.seed,
            "horse_count": self.horses,
            "round_count": self.rounds,
            "participants_per_round": self.participants,
            "tick_rate": self.tick_rate,
        }
        merged = msgspec.structs.asdict(config)
        merged.update({k: v for k, v in overrides.items() if v is not None})
        # convert() re-runs the bounds checks on the overridden values
        return msgspec.convert(merged, RaceConfig)

    def __call__(self) -> int:
        configure_logging(logging.DEBUG if self.verbose else logging.INFO)
        if not self.verbose:
            logging.getLogger("horse_race").setLevel(logging.WARNING)

        if self.config is not None and not self.config.exists():
            print(f"Error: Config file not found: {self.config}", file=sys.stderr)
            return 1

        try:
            config = self.load_config()
        except (msgspec.ValidationError, msgspec.DecodeError) as e:
            print(f"Error: Invalid configuration: {e}", file=sys.stderr)
            return 1

        engine = RaceEngine(random.Random(config.seed), rules=config.to_rules())
        engine.initialize()

        if engine.current is None:
            print("No rounds scheduled; nothing to run.")
            return 0

        driver = TickDriver(
            tick_rate=config.tick_rate,
            realtime=self.realtime,
            max_ticks=config.max_ticks_per_round,
        )

        with tqdm(total=len(engine.schedule), desc="Racing", unit="round") as pbar:
            while press_start(engine) == "in_progress":
                ticks = driver.run(engine)
                if engine.status != "finished":
                    tqdm.write(f"Round aborted after {ticks} ticks")
                    return 1
                write_result(engine.results[-1], ticks)
                pbar.update(1)

        print_standings(engine.results)
        return 0


def write_result(result: RaceResult, ticks: int) -> None:
    tqdm.write(f"{result_heading(result.round, result.distance)} ({ticks} ticks)")
    for entry in result.results:
        tqdm.write(f"  {position_text(entry.position):>4}  {entry.name}")


def print_standings(results: list[RaceResult]) -> None:
    table = Table(title="Standings")
    table.add_column("#", justify="right")
    table.add_column("Horse")
    table.add_column("Starts", justify="right")
    table.add_column("Wins", justify="right")
    table.add_column("Podiums", justify="right")
    table.add_column("Avg pos", justify="right")

    ranked = StandingsAggregator.from_results(results).ranked()
    for rank, standing in enumerate(ranked, start=1):
        table.add_row(
            str(rank),
            standing.name,
            str(standing.starts),
            str(standing.wins),
            str(standing.podiums),
            f"{standing.average_position:.2f}",
        )

    Console().print(table)


def main():
    """Entry point for CLI."""
    return cappa.invoke(Args)


if __name__ == "__main__":
    sys.exit(main())
