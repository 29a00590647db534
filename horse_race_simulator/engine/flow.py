from dataclasses import dataclass, replace

from horse_race_simulator.core.state import (
    CurrentRoundState,
    RaceResult,
    RaceResultEntry,
    RoundParticipant,
)

# Distance gained per tick for each point of condition.
SPEED_FACTOR = 0.1


@dataclass(frozen=True, slots=True)
class Finisher:
    index: int
    priority: float


def advance_participants(
    round_state: CurrentRoundState,
) -> tuple[list[RoundParticipant], list[Finisher]]:
    """
    Move every participant one fixed step.

    Returns fresh participant copies (the round state is not touched) and the
    participants that crossed the line during this step.
    """
    updated: list[RoundParticipant] = []
    finishers: list[Finisher] = []

    for index, participant in enumerate(round_state.participants):
        new_distance = (
            participant.traveled_distance + participant.condition * SPEED_FACTOR
        )
        if new_distance >= round_state.distance and participant.position == 0:
            finishers.append(Finisher(index=index, priority=new_distance))
        updated.append(
            replace(
                participant,
                traveled_distance=min(new_distance, round_state.distance),
            ),
        )

    return updated, finishers


def assign_positions(
    participants: list[RoundParticipant],
    finishers: list[Finisher],
    *,
    already_placed: int,
) -> list[RoundParticipant]:
    """
    Rank this step's finishers after the ones already placed.

    Higher priority finishes first; equal priorities keep lane order.
    Returns the participants in finishing order.
    """
    ordered = sorted(finishers, key=lambda f: (-f.priority, f.index))
    placed: list[RoundParticipant] = []
    for offset, finisher in enumerate(ordered, start=1):
        participant = participants[finisher.index]
        participant.position = already_placed + offset
        placed.append(participant)
    return placed


def build_result(round_state: CurrentRoundState) -> RaceResult:
    ranked = sorted(round_state.participants, key=lambda p: p.position)
    return RaceResult(
        round=round_state.round,
        distance=round_state.distance,
        results=tuple(
            RaceResultEntry(id=p.id, name=p.name, color=p.color, position=p.position)
            for p in ranked
        ),
    )
