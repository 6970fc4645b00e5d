# tests/test_cli.py

from cli.run_adaptive_test import handle_command, pump_clock
from content import InMemoryQuestionBank
from sat_engine import AdaptiveTestEngine, DifficultyTier, MonotonicClock, SubjectType, TestPhase

from conftest import make_question, small_config


def short_pool():
    # Module 1 can be served, module 2 cannot
    return [make_question(f"v{i}", SubjectType.VERBAL, DifficultyTier.MEDIUM) for i in range(10)]


def test_submit_shortfall_is_reported_and_retryable(make_engine):
    engine = make_engine(pool=short_pool())
    engine.start_test()
    engine.start_module(1)

    handle_command(engine, "s")
    assert engine.phase == TestPhase.MODULE_IN_PROGRESS

    handle_command(engine, "s")
    assert engine.phase == TestPhase.MODULE_IN_PROGRESS
    assert engine.session.module_results == []

    handle_command(engine, "q")
    assert engine.phase == TestPhase.ABANDONED


def test_failed_auto_submit_keeps_loop_alive(store):
    now = [0.0]
    clock = MonotonicClock(now=lambda: now[0])
    engine = AdaptiveTestEngine(
        "cli", InMemoryQuestionBank(short_pool()), store, clock, small_config(minutes=1)
    )
    engine.start_test()
    engine.start_module(1)

    now[0] = 61.0
    pump_clock(clock)
    assert engine.timer.has_expired
    assert engine.phase == TestPhase.MODULE_IN_PROGRESS
