from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from horse_race_simulator.core.types import RaceStatus
    from horse_race_simulator.engine.race_engine import RaceEngine


@dataclass(frozen=True, slots=True)
class ButtonState:
    text: str
    disabled: bool


def press_start(engine: RaceEngine) -> RaceStatus:
    """
    Apply the single start/pause/resume/next-round command.

    Only legal transitions are requested from the engine; pressing while
    nothing has been generated, or after the last round finished, does
    nothing.
    """
    status = engine.status
    if status in ("not_started", "paused"):
        engine.set_status("in_progress")
    elif status == "in_progress":
        engine.set_status("paused")
    elif status == "finished" and not engine.is_last_round:
        engine.advance_round()
        engine.set_status("in_progress")
    return engine.status


def start_button_state(status: RaceStatus, is_last_round: bool) -> ButtonState:
    if status == "in_progress":
        text = "Pause Race"
    elif status == "paused":
        text = "Resume Race"
    elif status == "finished":
        text = "Restart Race" if is_last_round else "Next Round"
    else:
        text = "Start Race"

    disabled = status == "not_initiated" or (status == "finished" and is_last_round)
    return ButtonState(text=text, disabled=disabled)
