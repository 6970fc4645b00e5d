# tests/conftest.py

from collections import defaultdict
from typing import List

import pytest

from content import InMemoryQuestionBank, MemoryResultStore
from sat_engine import (
    AdaptiveTestEngine,
    DifficultyTier,
    EngineConfig,
    ManualClock,
    Question,
    SubjectType,
)
from sat_engine.config import build_modules
from sat_engine.events import EVENTS

CATEGORIES = {
    SubjectType.VERBAL: ["reading-comprehension", "grammar", "vocabulary"],
    SubjectType.QUANTITATIVE: ["algebra", "geometry", "advanced-math"],
}


def make_question(qid: str, subject: SubjectType, tier: DifficultyTier, category: str = "general", correct: int = 0) -> Question:
    return Question(
        id=qid,
        subject=subject,
        difficulty=tier,
        category=category,
        prompt=f"Prompt {qid}",
        options=("A", "B", "C", "D"),
        correct_option_index=correct,
    )


def make_pool(per_tier: int = 60) -> List[Question]:
    pool = []
    for subject in SubjectType:
        cats = CATEGORIES[subject]
        for tier in DifficultyTier:
            for k in range(per_tier):
                pool.append(make_question(
                    f"{subject.value}-{tier.value}-{k}", subject, tier, cats[k % len(cats)], correct=k % 4,
                ))
    return pool


def small_config(questions: int = 10, minutes: float = 10) -> EngineConfig:
    return EngineConfig(modules=build_modules(questions, minutes, questions, minutes))


def answer_module(engine: AdaptiveTestEngine, n_correct: int) -> None:
    """Answer every question of the active module, the first n_correct correctly."""
    for i, q in enumerate(engine.questions):
        option = q.correct_option_index if i < n_correct else (q.correct_option_index + 1) % 4
        engine.select_answer(i, option)


class EventRecorder:
    def __init__(self, engine: AdaptiveTestEngine):
        self.calls = defaultdict(list)
        for name in EVENTS:
            engine.events.subscribe(name, self._make(name))

    def _make(self, name):
        def record(*args):
            self.calls[name].append(args[0] if len(args) == 1 else args)
        return record


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def store():
    return MemoryResultStore()


@pytest.fixture
def make_engine(clock, store):
    def factory(config: EngineConfig = None, pool: List[Question] = None, user_id: str = "user-1"):
        bank = InMemoryQuestionBank(pool if pool is not None else make_pool())
        return AdaptiveTestEngine(user_id, bank, store, clock, config or small_config())
    return factory
