from typing import Literal

RaceStatus = Literal[
    "not_initiated",
    "not_started",
    "in_progress",
    "finished",
    "paused",
]

EngineAction = Literal[
    "initialize",
    "advance_round",
    "set_status",
    "tick",
]

HexColor = str
