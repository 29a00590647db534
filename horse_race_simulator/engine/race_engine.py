import logging
import random
from collections.abc import Callable, Sequence

from horse_race_simulator.core.registry import HorseRegistry
from horse_race_simulator.core.state import (
    CurrentRoundState,
    Horse,
    LogContext,
    RaceResult,
    RaceRules,
    RaceState,
    RoundParticipant,
    ScheduleEntry,
)
from horse_race_simulator.core.types import EngineAction, RaceStatus
from horse_race_simulator.engine import ENGINE_ID_COUNTER
from horse_race_simulator.engine.flow import (
    advance_participants,
    assign_positions,
    build_result,
)
from horse_race_simulator.engine.logging import ContextFilter
from horse_race_simulator.engine.schedule import ScheduleGenerator

logger = logging.getLogger("horse_race.engine")
logger.addFilter(ContextFilter())

EngineListener = Callable[["RaceEngine", EngineAction], None]


class RaceEngine:
    """
    Owns the state of one race program and the actions that mutate it.

    The engine has no notion of wall-clock time: a driver calls ``tick`` at a
    steady cadence while the status is ``in_progress`` and stops as soon as it
    changes. Actions are synchronous and must not be interleaved.
    """

    def __init__(
        self,
        rng: random.Random,
        *,
        rules: RaceRules | None = None,
        log_context: LogContext | None = None,
        horses: Sequence[Horse] | None = None,
        registry: HorseRegistry | None = None,
        scheduler: ScheduleGenerator | None = None,
    ) -> None:
        self.rng: random.Random = rng
        self.rules: RaceRules = rules if rules is not None else RaceRules()
        self.log_context: LogContext = (
            log_context
            if log_context is not None
            else LogContext(engine_id=next(ENGINE_ID_COUNTER))
        )
        self.registry: HorseRegistry = registry or HorseRegistry(rng)
        self.scheduler: ScheduleGenerator = scheduler or ScheduleGenerator(rng)

        if horses is None:
            horses = self.registry.generate(self.rules.horse_count)
        self.state: RaceState = RaceState(all_horses=list(horses))

        self._listeners: list[EngineListener] = []
        self._log_extra: dict[str, LogContext] = {"log_context": self.log_context}

    # ------------------------------
    # Read access
    # ------------------------------

    @property
    def status(self) -> RaceStatus:
        return self.state.status

    @property
    def horses(self) -> list[Horse]:
        return self.state.all_horses

    @property
    def schedule(self) -> list[ScheduleEntry]:
        return self.state.schedule

    @property
    def results(self) -> list[RaceResult]:
        return self.state.results

    @property
    def current_round(self) -> int:
        return self.state.current_round

    @property
    def current(self) -> CurrentRoundState | None:
        return self.state.current

    @property
    def is_last_round(self) -> bool:
        return self.state.current_round == len(self.state.schedule) - 1

    def subscribe(self, listener: EngineListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: EngineListener) -> None:
        self._listeners.remove(listener)

    def _notify(self, action: EngineAction) -> None:
        for listener in list(self._listeners):
            listener(self, action)

    def log_info(self, msg: str) -> None:
        logger.info(msg, extra=self._log_extra)

    def log_debug(self, msg: str) -> None:
        logger.debug(msg, extra=self._log_extra)

    def log_warning(self, msg: str) -> None:
        logger.warning(msg, extra=self._log_extra)

    # ------------------------------
    # Actions
    # ------------------------------

    def initialize(self) -> None:
        """Generate a fresh program and make its first round active."""
        state = self.state
        state.schedule = self.scheduler.initialize(
            self.rules.round_count,
            state.all_horses,
            self.rules.participants_per_round,
        )
        state.current_round = -1
        state.current = None
        state.results = []
        state.status = "not_started"
        self.log_context.start_round(0)
        self.log_info(
            f"Program generated: {len(state.schedule)} rounds, "
            f"{len(state.all_horses)} horses",
        )
        self._notify("initialize")

        self.advance_round()

    def advance_round(self) -> None:
        state = self.state
        next_round = state.current_round + 1

        if next_round >= len(state.schedule):
            self.log_debug("No round left to advance to")
            return

        entry = state.schedule[next_round]
        state.current = CurrentRoundState(
            round=entry.round,
            distance=entry.distance,
            participants=[RoundParticipant.from_horse(h) for h in entry.participants],
        )
        state.current_round = next_round
        self.log_context.start_round(entry.round)
        self.log_info(
            f"Round {entry.round} ready: {entry.distance}m, "
            f"{len(entry.participants)} horses",
        )
        self._notify("advance_round")

    def set_status(self, status: RaceStatus) -> None:
        # Transitions are the caller's responsibility (see engine.controls).
        previous = self.state.status
        self.state.status = status
        self.log_debug(f"Status: {previous} -> {status}")
        self._notify("set_status")

    def tick(self) -> None:
        """Advance every horse of the active round by one fixed step."""
        state = self.state
        current = state.current

        if current is None:
            self.log_warning("!!! Tick without an active round")
            state.status = "not_started"
            self._notify("tick")
            return

        self.log_context.next_tick()
        already_placed = current.finished_count
        participants, finishers = advance_participants(current)

        if finishers:
            placed = assign_positions(
                participants,
                finishers,
                already_placed=already_placed,
            )
            for participant in placed:
                self.log_info(
                    f"Finish: {participant.repr} placed {participant.position} "
                    f"({participant.traveled_distance:g}m)",
                )

        current.participants = participants

        if current.complete:
            if not current.recorded:
                result = build_result(current)
                state.results.append(result)
                current.recorded = True
                winner = result.winner
                self.log_info(
                    f"Round {current.round} complete, winner "
                    f"{winner.name if winner else '-'}",
                )
            state.status = "finished"

        self._notify("tick")
