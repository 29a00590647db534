import logging
from unittest.mock import MagicMock

import pytest

from horse_race_simulator.engine.driver import TickDriver
from tests.test_utils import HorseConfig


def test_runs_until_round_finishes(scenario):
    s = scenario([HorseConfig(0, 80), HorseConfig(1, 100)])
    s.start()

    ticks = TickDriver().run(s.engine)

    assert ticks == 150
    assert s.engine.status == "finished"
    assert len(s.engine.results) == 1


def test_does_not_tick_unless_in_progress(scenario):
    s = scenario([HorseConfig(0)])
    s.engine.initialize()

    assert TickDriver().run(s.engine) == 0
    assert s.engine.current is not None
    assert s.engine.current.participants[0].traveled_distance == 0


def test_tick_budget_pauses_the_race(scenario, caplog: pytest.LogCaptureFixture):
    s = scenario([HorseConfig(0, 80)])
    s.start()

    with caplog.at_level(logging.WARNING, logger="horse_race.driver"):
        ticks = TickDriver(max_ticks=10).run(s.engine)

    assert ticks == 10
    assert s.engine.status == "paused"
    assert "Tick budget" in caplog.text


def test_stops_as_soon_as_status_changes(scenario):
    s = scenario([HorseConfig(0, 80)])
    s.start()

    def pause_after_five(engine, action):
        if action == "tick" and engine.log_context.tick == 5:
            engine.set_status("paused")

    s.engine.subscribe(pause_after_five)

    assert TickDriver().run(s.engine) == 5
    assert s.engine.status == "paused"


def test_realtime_paces_ticks(scenario):
    s = scenario([HorseConfig(0, 100)])
    s.start()
    sleep = MagicMock()

    driver = TickDriver(tick_rate=50.0, realtime=True, clock=lambda: 0.0, sleep=sleep)
    ticks = driver.run(s.engine)

    assert ticks == 120
    assert sleep.call_count == ticks
    sleep.assert_called_with(pytest.approx(0.02))


def test_realtime_skips_sleep_when_behind(scenario):
    s = scenario([HorseConfig(0, 100)])
    s.start()
    sleep = MagicMock()
    now = iter(float(i) for i in range(10_000))

    driver = TickDriver(realtime=True, clock=lambda: next(now), sleep=sleep)
    driver.run(s.engine)

    sleep.assert_not_called()


def test_restarting_a_finished_round_stops_after_one_tick(scenario):
    s = scenario([HorseConfig(0, 100)])
    s.start()
    TickDriver().run(s.engine)
    s.engine.set_status("in_progress")

    assert TickDriver().run(s.engine) == 1
    assert s.engine.status == "finished"
    assert len(s.engine.results) == 1
