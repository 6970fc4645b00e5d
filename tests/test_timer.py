# tests/test_timer.py

import pytest

from sat_engine import ManualClock, ModuleTimer, MonotonicClock


def make_timer(clock, duration, log):
    return ModuleTimer(
        duration,
        clock,
        on_tick=lambda s: log.append(("tick", s)),
        on_warning=lambda s: log.append(("warning", s)),
        on_expired=lambda: log.append(("expired",)),
    )


def test_counts_down_and_warns_once_per_threshold():
    clock, log = ManualClock(), []
    timer = make_timer(clock, 400, log)
    timer.start()

    clock.advance(100)
    assert timer.remaining_seconds == 300
    assert [e for e in log if e[0] == "warning"] == [("warning", 300)]

    clock.advance(300)
    warnings = [e for e in log if e[0] == "warning"]
    assert warnings == [("warning", 300), ("warning", 60)]
    assert log.count(("expired",)) == 1
    assert timer.remaining_seconds == 0
    assert timer.elapsed_seconds == 400


def test_short_module_only_crosses_last_threshold():
    clock, log = ManualClock(), []
    timer = make_timer(clock, 120, log)
    timer.start()
    clock.advance(120)
    assert [e for e in log if e[0] == "warning"] == [("warning", 60)]


def test_expiry_fires_once_and_detaches():
    clock, log = ManualClock(), []
    timer = make_timer(clock, 3, log)
    timer.start()
    clock.advance(10)
    assert log.count(("expired",)) == 1
    assert len([e for e in log if e[0] == "tick"]) == 3
    assert timer.has_expired
    assert not timer.is_running
    assert clock.listener_count == 0


def test_stop_is_idempotent_and_silences_ticks():
    clock, log = ManualClock(), []
    timer = make_timer(clock, 100, log)
    timer.start()
    clock.advance(5)
    timer.stop()
    timer.stop()
    clock.advance(200)
    assert len(log) == 5
    assert timer.remaining_seconds == 95
    assert clock.listener_count == 0


def test_start_after_expiry_is_ignored():
    clock, log = ManualClock(), []
    timer = make_timer(clock, 1, log)
    timer.start()
    clock.advance(1)
    timer.start()
    clock.advance(5)
    assert log.count(("expired",)) == 1
    assert clock.listener_count == 0


def test_invalid_duration():
    with pytest.raises(ValueError):
        ModuleTimer(0, ManualClock())


def test_manual_clock_rejects_negative_advance():
    with pytest.raises(ValueError):
        ManualClock().advance(-1)


def test_monotonic_clock_replays_whole_seconds():
    now = [100.0]
    clock = MonotonicClock(now=lambda: now[0])
    ticks = []
    clock.subscribe(lambda: ticks.append(1))

    now[0] = 100.4
    assert clock.pump() == 0
    now[0] = 102.7
    assert clock.pump() == 2
    now[0] = 103.1
    assert clock.pump() == 1
    assert len(ticks) == 3


def test_monotonic_clock_skips_time_without_listeners():
    now = [0.0]
    clock = MonotonicClock(now=lambda: now[0])
    now[0] = 700.0
    assert clock.pump() == 0

    ticks = []
    clock.subscribe(lambda: ticks.append(1))
    now[0] = 702.5
    assert clock.pump() == 2
    assert len(ticks) == 2


def test_module_timer_starts_from_subscription_on_wall_clock():
    now = [50.0]
    clock, log = MonotonicClock(now=lambda: now[0]), []
    timer = make_timer(clock, 600, log)
    now[0] = 800.0
    timer.start()
    now[0] = 805.0
    clock.pump()
    assert timer.remaining_seconds == 595
    assert ("expired",) not in log
