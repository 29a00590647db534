"""Configuration schema for race programs using msgspec."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import msgspec

from horse_race_simulator.core.state import RaceRules

NonNegativeInt = Annotated[int, msgspec.Meta(ge=0)]
PositiveInt = Annotated[int, msgspec.Meta(ge=1)]
PositiveFloat = Annotated[float, msgspec.Meta(gt=0)]


class RaceConfig(msgspec.Struct, forbid_unknown_fields=True):
    """
    TOML-backed configuration for a race program.

    Bounds are checked on decode only; building RaceRules directly skips them.
    """

    horse_count: NonNegativeInt = 20
    round_count: NonNegativeInt = 6
    participants_per_round: PositiveInt = 10

    # None draws a fresh seed from the OS
    seed: int | None = None

    # Driver settings
    tick_rate: PositiveFloat = 60.0
    max_ticks_per_round: PositiveInt = 10_000

    @classmethod
    def from_toml(cls, path: str | Path) -> RaceConfig:
        """Load configuration from a TOML file path."""
        with Path(path).open("rb") as f:
            return msgspec.toml.decode(f.read(), type=cls)

    def to_rules(self) -> RaceRules:
        return RaceRules(
            horse_count=self.horse_count,
            round_count=self.round_count,
            participants_per_round=self.participants_per_round,
        )
