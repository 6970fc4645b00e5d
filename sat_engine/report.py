# sat_engine/report.py

from __future__ import annotations

from typing import Dict

from .schema import CategoryScore, DifficultyTier, SubjectType, TestSession
from .scoring import raw_counts


def subject_breakdown(session: TestSession) -> Dict[SubjectType, CategoryScore]:
    return {
        subject: CategoryScore(*raw_counts(session.module_results, subject))
        for subject in SubjectType
    }


def category_breakdown(session: TestSession) -> Dict[str, CategoryScore]:
    """Category totals merged across every completed module."""
    merged: Dict[str, CategoryScore] = {}
    for result in session.module_results:
        for cat, score in result.performance.category_scores.items():
            prev = merged.get(cat, CategoryScore())
            merged[cat] = CategoryScore(prev.correct + score.correct, prev.total + score.total)
    return merged


def difficulty_breakdown(session: TestSession) -> Dict[DifficultyTier, CategoryScore]:
    merged = {tier: [0, 0] for tier in DifficultyTier}
    for result in session.module_results:
        correct_ids = {a.question_id for a in result.answers if a.is_correct}
        for q in result.questions:
            merged[q.difficulty][1] += 1
            if q.id in correct_ids:
                merged[q.difficulty][0] += 1
    return {tier: CategoryScore(c, t) for tier, (c, t) in merged.items()}


def percentage_score(session: TestSession) -> int:
    correct = sum(r.performance.questions_correct for r in session.module_results)
    total = sum(r.performance.total_questions for r in session.module_results)
    return round(100 * correct / total) if total else 0
