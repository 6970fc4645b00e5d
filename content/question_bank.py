"""In-memory question supply and JSON import/export for question banks."""

import json
import logging
from dataclasses import asdict
from typing import Iterable, List, Optional, Set

from sat_engine.schema import DifficultyTier, Question, SubjectType

logger = logging.getLogger(__name__)


class InMemoryQuestionBank:
    """
    Serves questions in pool order, filtered by subject and optionally tier.
    A question is issued at most once per bank instance, so one bank
    should back one session.
    """

    def __init__(self, questions: Iterable[Question]):
        self._pool: List[Question] = list(questions)
        self._issued: Set[str] = set()

    def __len__(self) -> int:
        return len(self._pool)

    @property
    def issued_ids(self) -> Set[str]:
        return set(self._issued)

    def available(self, subject: SubjectType, tier: Optional[DifficultyTier] = None) -> int:
        return sum(1 for q in self._candidates(subject, tier))

    def _candidates(self, subject: SubjectType, tier: Optional[DifficultyTier]):
        for q in self._pool:
            if q.id in self._issued or q.subject != subject:
                continue
            if tier is not None and q.difficulty != tier:
                continue
            yield q

    def fetch_questions(self, subject: SubjectType, tier: Optional[DifficultyTier], count: int) -> List[Question]:
        picked: List[Question] = []
        for q in self._candidates(subject, tier):
            if len(picked) >= count:
                break
            picked.append(q)
        self._issued.update(q.id for q in picked)
        if len(picked) < count:
            logger.warning(
                f"⚠️ Bank short for {subject.value}/{tier.value if tier else 'any'}: {len(picked)}/{count}"
            )
        return picked


# ============================
# JSON I/O
# ============================

def question_from_dict(data: dict) -> Question:
    return Question(
        id=str(data["id"]),
        subject=SubjectType(data["subject"]),
        difficulty=DifficultyTier(data["difficulty"]),
        category=data.get("category", "general"),
        prompt=data["prompt"],
        options=tuple(data["options"]),
        correct_option_index=int(data["correct_option_index"]),
        explanation=data.get("explanation", ""),
        passage=data.get("passage"),
        time_estimate_seconds=data.get("time_estimate_seconds"),
    )


def load_bank(path: str) -> List[Question]:
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    questions = [question_from_dict(item) for item in payload]
    logger.info(f"Loaded {len(questions)} questions from {path}")
    return questions


def save_bank(questions: Iterable[Question], path: str) -> None:
    payload = []
    for q in questions:
        item = asdict(q)
        item["subject"] = q.subject.value
        item["difficulty"] = q.difficulty.value
        item["options"] = list(q.options)
        payload.append(item)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=4)
