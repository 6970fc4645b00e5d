# tests/test_ledger.py

import pytest

from sat_engine import AnswerLedger, DifficultyTier, SubjectType

from conftest import make_question


@pytest.fixture
def ledger():
    questions = [
        make_question(f"q{i}", SubjectType.VERBAL, DifficultyTier.MEDIUM, correct=i % 4)
        for i in range(5)
    ]
    return AnswerLedger(questions)


def test_select_overwrites_previous_choice(ledger):
    first = ledger.select(2, 0)
    second = ledger.select(2, 2)
    assert not first.is_correct
    assert second.is_correct
    assert len(ledger) == 1
    assert [a.question_id for a in ledger.snapshot()] == ["q2"]
    assert ledger.selected_option(2) == 2


def test_snapshot_is_ordered_by_question_index(ledger):
    ledger.select(4, 0)
    ledger.select(0, 0)
    ledger.select(3, 1)
    assert [a.question_id for a in ledger.snapshot()] == ["q0", "q3", "q4"]


def test_dwell_accumulates_across_revisits(ledger):
    ledger.add_dwell(1, 4)
    ledger.add_dwell(0, 2)
    ledger.add_dwell(1, 3)
    answer = ledger.select(1, 1)
    assert answer.time_spent_seconds == 7
    assert ledger.dwell_seconds(0) == 2


def test_dwell_after_selection_shows_in_snapshot(ledger):
    ledger.select(0, 0)
    ledger.add_dwell(0, 5)
    assert ledger.snapshot()[0].time_spent_seconds == 5


def test_unanswered_question_has_no_answer(ledger):
    assert ledger.answer_for(3) is None
    assert ledger.selected_option(3) is None


def test_invalid_indices_rejected(ledger):
    with pytest.raises(IndexError):
        ledger.select(5, 0)
    with pytest.raises(ValueError):
        ledger.select(0, 4)
    assert len(ledger) == 0
