from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, override

from rich.logging import RichHandler

from horse_race_simulator.core.names import HORSE_ADJECTIVES, HORSE_NOUNS

if TYPE_CHECKING:
    from horse_race_simulator.core.state import LogContext

NAME_WORDS = set(HORSE_ADJECTIVES) | set(HORSE_NOUNS)

# Precompiled regex patterns for highlighting
HORSE_WORD_PATTERN = re.compile(
    rf"(?<!\[)\b({'|'.join(map(re.escape, sorted(NAME_WORDS)))})\b"
)
ROUND_PATTERN = re.compile(r"\bRound \d+\b")


# Simple color theme for Rich
COLOR = {
    "finish": "bold green",
    "round": "bold magenta",
    "warning": "bold red",
    "horse": "yellow",
    "prefix": "dim",
}


class ContextFilter(logging.Filter):
    """Expand the LogContext an engine passes via ``extra`` into record fields."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        logctx: LogContext | None = getattr(record, "log_context", None)
        if logctx is None:
            return True
        record.engine_id = logctx.engine_id
        record.round_number = logctx.round_number
        record.tick = logctx.tick
        record.round_log_count = logctx.round_log_count
        logctx.inc_log_count()
        return True


class RichMarkupFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        engine_id = getattr(record, "engine_id", "-")
        round_number = getattr(record, "round_number", 0)
        tick = getattr(record, "tick", 0)
        round_log_count = getattr(record, "round_log_count", 0)
        prefix = f"{engine_id} R{round_number}.{tick}.{round_log_count}"

        styled = record.getMessage()

        styled = re.sub(
            r"\bFinish\b", f"[{COLOR['finish']}]Finish[/{COLOR['finish']}]", styled
        )
        styled = ROUND_PATTERN.sub(
            rf"[{COLOR['round']}]\g<0>[/{COLOR['round']}]", styled
        )
        styled = re.sub(r"!!!", f"[{COLOR['warning']}]!!![/{COLOR['warning']}]", styled)
        styled = HORSE_WORD_PATTERN.sub(
            rf"[{COLOR['horse']}]\1[/{COLOR['horse']}]", styled
        )

        if record.levelno >= logging.WARNING:
            styled = f"[{COLOR['warning']}]{styled}[/{COLOR['warning']}]"

        return f"[{COLOR['prefix']}]{prefix}[/{COLOR['prefix']}]  {styled}"


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)
    handler = RichHandler(markup=True, show_path=False, show_time=False)
    handler.setFormatter(RichMarkupFormatter())
    logger.handlers.clear()
    logger.addHandler(handler)
