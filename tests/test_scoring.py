# tests/test_scoring.py

from datetime import datetime, timezone

import pytest

from sat_engine import (
    ModulePerformance,
    ModuleResult,
    ScaleRange,
    SubjectType,
    convert_scores,
    minimum_total,
    scale_subject,
)
from sat_engine.scoring import raw_counts, score_results


def test_all_zero_gives_minimum_total():
    score = convert_scores(0, 0, 0, 0)
    assert (score.verbal, score.quantitative, score.total) == (200, 200, 400)
    assert score.total == minimum_total()


def test_perfect_score():
    score = convert_scores(54, 54, 44, 44)
    assert (score.verbal, score.quantitative, score.total) == (800, 800, 1600)


def test_half_correct_is_midpoint():
    assert scale_subject(27, 54) == 500


@pytest.mark.parametrize("total", [1, 7, 10, 44, 54])
def test_monotonic_in_correct_count(total):
    verbal = [convert_scores(c, total, 0, 0).verbal for c in range(total + 1)]
    quant = [convert_scores(0, 0, c, total).quantitative for c in range(total + 1)]
    assert all(a <= b for a, b in zip(verbal, verbal[1:]))
    assert all(a <= b for a, b in zip(quant, quant[1:]))
    assert verbal[0] == 200 and verbal[-1] == 800


def test_scores_snap_to_step_and_stay_in_range():
    for c in range(0, 45):
        s = scale_subject(c, 44)
        assert s % 10 == 0
        assert 200 <= s <= 800


def test_out_of_range_counts_are_clamped():
    assert scale_subject(60, 54) == 800
    assert scale_subject(-3, 54) == 200


def test_custom_scale():
    scale = ScaleRange(low=0, high=100, step=5)
    assert scale_subject(1, 3, scale) == 35
    assert convert_scores(0, 0, 0, 0, scale).total == 0


def test_invalid_scale_rejected():
    with pytest.raises(ValueError):
        ScaleRange(low=800, high=200)


def _result(module_id, subject, correct, total):
    return ModuleResult(
        module_id=module_id,
        subject=subject,
        difficulty_tier=None,
        answers=(),
        performance=ModulePerformance(
            score_fraction=correct / total, time_used_seconds=0,
            questions_correct=correct, total_questions=total,
        ),
        completed_at=datetime.now(timezone.utc),
    )


def test_score_results_sums_modules_per_subject():
    results = [
        _result(1, SubjectType.VERBAL, 20, 27),
        _result(2, SubjectType.VERBAL, 7, 27),
        _result(3, SubjectType.QUANTITATIVE, 22, 22),
        _result(4, SubjectType.QUANTITATIVE, 22, 22),
    ]
    assert raw_counts(results, SubjectType.VERBAL) == (27, 54)
    score = score_results(results)
    assert score.verbal == 500
    assert score.quantitative == 800
    assert score.total == 1300
