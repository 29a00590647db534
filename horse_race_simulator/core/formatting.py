from horse_race_simulator.core.generators import ordinal_suffix


def lap_text(round_number: int, distance: int) -> str:
    """Title of a running round, e.g. ``1st Lap 1200m``."""
    return f"{round_number}{ordinal_suffix(round_number)} Lap {distance}m"


def result_heading(round_number: int, distance: int) -> str:
    """Heading of a finished round, e.g. ``1ST Lap - 1200m``."""
    return f"{round_number}{ordinal_suffix(round_number, True)} Lap - {distance}m"


def position_text(position: int) -> str:
    if position <= 0:
        return ""
    return f"{position}{ordinal_suffix(position)}"
