# sat_engine/performance.py

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from .schema import Answer, CategoryScore, ModulePerformance, Question


def category_scores(questions: Sequence[Question], answers: Sequence[Answer]) -> Dict[str, CategoryScore]:
    """(correct, total) per category; unanswered questions count as incorrect."""
    correct_ids = {a.question_id for a in answers if a.is_correct}
    counts: Dict[str, List[int]] = {}
    for q in questions:
        bucket = counts.setdefault(q.category, [0, 0])
        bucket[1] += 1
        if q.id in correct_ids:
            bucket[0] += 1
    return {cat: CategoryScore(correct=c, total=t) for cat, (c, t) in counts.items()}


def rank_areas(
    scores: Dict[str, CategoryScore],
    min_questions: int = 3,
    strong_percent: float = 75.0,
    weak_percent: float = 60.0,
    limit: int = 3,
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Strong areas best-first and weak areas worst-first, each capped at limit."""
    eligible = [(cat, s.percentage) for cat, s in scores.items() if s.total >= min_questions]

    strong = sorted((e for e in eligible if e[1] >= strong_percent), key=lambda e: (-e[1], e[0]))
    weak = sorted((e for e in eligible if e[1] < weak_percent), key=lambda e: (e[1], e[0]))

    return (
        tuple(cat for cat, _ in strong[:limit]),
        tuple(cat for cat, _ in weak[:limit]),
    )


def compute_module_performance(
    questions: Sequence[Question],
    answers: Sequence[Answer],
    time_used_seconds: int,
    *,
    min_questions: int = 3,
    strong_percent: float = 75.0,
    weak_percent: float = 60.0,
    limit: int = 3,
) -> ModulePerformance:
    total = len(questions)
    correct = sum(1 for a in answers if a.is_correct)
    scores = category_scores(questions, answers)
    strong, weak = rank_areas(scores, min_questions, strong_percent, weak_percent, limit)

    return ModulePerformance(
        score_fraction=correct / total if total else 0.0,
        time_used_seconds=time_used_seconds,
        questions_correct=correct,
        total_questions=total,
        strong_areas=strong,
        weak_areas=weak,
        average_time_per_question=time_used_seconds / total if total else 0.0,
        category_scores=scores,
    )
