# tests/test_router.py

import pytest

from sat_engine import DifficultyTier, ModulePerformance, select_difficulty_tier


def perf(correct: int, total: int) -> ModulePerformance:
    return ModulePerformance(
        score_fraction=correct / total if total else 0.0,
        time_used_seconds=0,
        questions_correct=correct,
        total_questions=total,
    )


def test_empty_module_routes_to_medium():
    assert select_difficulty_tier(perf(0, 0)) == DifficultyTier.MEDIUM


@pytest.mark.parametrize(
    "correct,total,expected",
    [
        (39, 100, DifficultyTier.EASY),
        (40, 100, DifficultyTier.MEDIUM),
        (69, 100, DifficultyTier.MEDIUM),
        (70, 100, DifficultyTier.HARD),
        (0, 10, DifficultyTier.EASY),
        (10, 10, DifficultyTier.HARD),
        (8, 10, DifficultyTier.HARD),
        (2, 10, DifficultyTier.EASY),
    ],
)
def test_threshold_boundaries(correct, total, expected):
    assert select_difficulty_tier(perf(correct, total)) == expected


def test_router_is_total_over_small_modules():
    for total in range(1, 31):
        for correct in range(total + 1):
            tier = select_difficulty_tier(perf(correct, total))
            if 10 * correct >= 7 * total:
                assert tier == DifficultyTier.HARD
            elif 10 * correct >= 4 * total:
                assert tier == DifficultyTier.MEDIUM
            else:
                assert tier == DifficultyTier.EASY


def test_custom_thresholds():
    p = perf(5, 10)
    assert select_difficulty_tier(p, hard_threshold=0.5, medium_threshold=0.2) == DifficultyTier.HARD
    assert select_difficulty_tier(p, hard_threshold=0.9, medium_threshold=0.6) == DifficultyTier.EASY
