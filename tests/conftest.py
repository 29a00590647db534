from typing import Callable

import pytest

from tests.test_utils import HorseConfig, RaceScenario


@pytest.fixture
def scenario() -> Callable[..., RaceScenario]:
    """Factory fixture to create scenarios."""

    def _builder(
        horses_config: list[HorseConfig],
        round_count: int = 2,
        participants_per_round: int | None = None,
    ) -> RaceScenario:
        return RaceScenario(horses_config, round_count, participants_per_round)

    return _builder
