from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from horse_race_simulator.core.state import RaceResult
    from horse_race_simulator.core.types import EngineAction, RaceStatus
    from horse_race_simulator.engine.race_engine import RaceEngine


@dataclass(frozen=True, slots=True)
class SnapshotPolicy:
    snapshot_actions: frozenset[EngineAction] = frozenset(
        {"initialize", "advance_round", "set_status"}
    )
    # Unless "tick" is listed above, ticks are recorded only when a horse
    # finished during them.
    snapshot_finishing_ticks: bool = True


@dataclass(frozen=True, slots=True)
class StepSnapshot:
    step_index: int
    action: EngineAction
    round: int | None
    status: RaceStatus
    names: list[str]
    traveled: list[float]
    positions: list[int]


@dataclass(slots=True)
class SnapshotRecorder:
    policy: SnapshotPolicy = field(default_factory=SnapshotPolicy)
    step_history: list[StepSnapshot] = field(default_factory=list)
    round_map: dict[int, list[int]] = field(default_factory=dict)
    _last_finished: int = 0

    def attach(self, engine: RaceEngine) -> None:
        engine.subscribe(self.on_action)

    def detach(self, engine: RaceEngine) -> None:
        engine.unsubscribe(self.on_action)

    def on_action(self, engine: RaceEngine, action: EngineAction) -> None:
        current = engine.current
        finished = current.finished_count if current is not None else 0

        if action == "tick" and "tick" not in self.policy.snapshot_actions:
            if self.policy.snapshot_finishing_ticks and finished > self._last_finished:
                self.capture(engine, action)
        elif action in self.policy.snapshot_actions:
            self.capture(engine, action)

        self._last_finished = finished

    def capture(self, engine: RaceEngine, action: EngineAction) -> None:
        current = engine.current
        participants = current.participants if current is not None else []

        snapshot = StepSnapshot(
            step_index=len(self.step_history),
            action=action,
            round=current.round if current is not None else None,
            status=engine.status,
            names=[p.name for p in participants],
            traveled=[p.traveled_distance for p in participants],
            positions=[p.position for p in participants],
        )

        self.step_history.append(snapshot)
        if snapshot.round is not None:
            self.round_map.setdefault(snapshot.round, []).append(snapshot.step_index)


@dataclass(slots=True)
class HorseStanding:
    horse_id: int
    name: str
    starts: int = 0
    wins: int = 0
    podiums: int = 0
    position_sum: int = 0

    @property
    def average_position(self) -> float:
        return self.position_sum / self.starts if self.starts else 0.0


@dataclass(slots=True)
class StandingsAggregator:
    """Accumulates per-horse stats over finished rounds."""

    standings: dict[int, HorseStanding] = field(default_factory=dict)

    @classmethod
    def from_results(cls, results: Iterable[RaceResult]) -> StandingsAggregator:
        aggregator = cls()
        for result in results:
            aggregator.add_result(result)
        return aggregator

    def add_result(self, result: RaceResult) -> None:
        for entry in result.results:
            standing = self.standings.setdefault(
                entry.id, HorseStanding(horse_id=entry.id, name=entry.name)
            )
            standing.starts += 1
            standing.position_sum += entry.position
            if entry.position == 1:
                standing.wins += 1
            if entry.position <= 3:
                standing.podiums += 1

    def ranked(self) -> list[HorseStanding]:
        return sorted(
            self.standings.values(),
            key=lambda s: (-s.wins, -s.podiums, s.average_position, s.horse_id),
        )
