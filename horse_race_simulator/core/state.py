from dataclasses import dataclass, field

from horse_race_simulator.core.types import HexColor, RaceStatus


@dataclass(frozen=True, slots=True)
class Horse:
    id: int
    name: str
    color: HexColor
    condition: int

    @property
    def repr(self) -> str:
        return f"{self.id}:{self.name}"


@dataclass(frozen=True, slots=True)
class ScheduleEntry:
    round: int
    distance: int
    participants: tuple[Horse, ...]


@dataclass(slots=True)
class RoundParticipant:
    id: int
    name: str
    color: HexColor
    condition: int
    traveled_distance: float = 0.0
    position: int = 0

    @classmethod
    def from_horse(cls, horse: Horse) -> "RoundParticipant":
        return cls(
            id=horse.id,
            name=horse.name,
            color=horse.color,
            condition=horse.condition,
        )

    @property
    def repr(self) -> str:
        return f"{self.id}:{self.name}"

    @property
    def finished(self) -> bool:
        return self.position > 0


@dataclass(slots=True)
class CurrentRoundState:
    round: int
    distance: int
    participants: list[RoundParticipant] = field(default_factory=list)
    # Set once the round's RaceResult has been appended.
    recorded: bool = False

    @property
    def finished_count(self) -> int:
        return sum(1 for p in self.participants if p.finished)

    @property
    def complete(self) -> bool:
        return all(p.finished for p in self.participants)


@dataclass(frozen=True, slots=True)
class RaceResultEntry:
    id: int
    name: str
    color: HexColor
    position: int


@dataclass(frozen=True, slots=True)
class RaceResult:
    round: int
    distance: int
    results: tuple[RaceResultEntry, ...]

    @property
    def winner(self) -> RaceResultEntry | None:
        return self.results[0] if self.results else None


@dataclass(slots=True)
class RaceRules:
    horse_count: int = 20
    round_count: int = 6
    participants_per_round: int = 10


@dataclass(slots=True)
class RaceState:
    all_horses: list[Horse]
    schedule: list[ScheduleEntry] = field(default_factory=list)
    results: list[RaceResult] = field(default_factory=list)
    current_round: int = -1
    current: CurrentRoundState | None = None
    status: RaceStatus = "not_initiated"


@dataclass(slots=True)
class LogContext:
    """Per-engine counters injected into log records."""

    engine_id: int
    round_number: int = 0
    tick: int = 0
    round_log_count: int = 0

    def start_round(self, round_number: int) -> None:
        self.round_number = round_number
        self.tick = 0
        self.round_log_count = 0

    def next_tick(self) -> None:
        self.tick += 1

    def inc_log_count(self) -> None:
        self.round_log_count += 1
