# sat_engine/scoring.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

from .schema import ModuleResult, ScaledScore, SubjectType


@dataclass(frozen=True)
class ScaleRange:
    """Scaled bounds for a single subject (SAT style 200-800)."""
    low: int = 200
    high: int = 800
    step: int = 10

    def __post_init__(self) -> None:
        if self.high < self.low:
            raise ValueError("ScaleRange.high must be >= low")
        if self.step <= 0:
            raise ValueError("ScaleRange.step must be positive")


DEFAULT_SCALE = ScaleRange()


def scale_subject(correct: int, total: int, scale: ScaleRange = DEFAULT_SCALE) -> int:
    """
    Linear map of the raw fraction onto [low, high], rounded half-up
    to the nearest step. total == 0 gives the floor of the range.
    """
    if total <= 0:
        return scale.low
    c = min(max(correct, 0), total)
    raw = scale.low + (scale.high - scale.low) * c / total
    snapped = int(math.floor(raw / scale.step + 0.5)) * scale.step
    return min(max(snapped, scale.low), scale.high)


def convert_scores(
    verbal_correct: int,
    verbal_total: int,
    quant_correct: int,
    quant_total: int,
    scale: ScaleRange = DEFAULT_SCALE,
) -> ScaledScore:
    """Raw correct counts per subject -> scaled verbal, quantitative and total."""
    verbal = scale_subject(verbal_correct, verbal_total, scale)
    quant = scale_subject(quant_correct, quant_total, scale)
    return ScaledScore(verbal=verbal, quantitative=quant, total=verbal + quant)


def minimum_total(scale: ScaleRange = DEFAULT_SCALE) -> int:
    return 2 * scale.low


def raw_counts(results: Iterable[ModuleResult], subject: SubjectType) -> Tuple[int, int]:
    """Sum of (questions_correct, total_questions) over modules of one subject."""
    correct = total = 0
    for r in results:
        if r.subject != subject:
            continue
        correct += r.performance.questions_correct
        total += r.performance.total_questions
    return correct, total


def score_results(results: Iterable[ModuleResult], scale: ScaleRange = DEFAULT_SCALE) -> ScaledScore:
    results = list(results)
    vc, vt = raw_counts(results, SubjectType.VERBAL)
    qc, qt = raw_counts(results, SubjectType.QUANTITATIVE)
    return convert_scores(vc, vt, qc, qt, scale)
