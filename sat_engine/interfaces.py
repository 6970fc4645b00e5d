# sat_engine/interfaces.py

"""Collaborator contracts consumed by the engine."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .schema import DifficultyTier, Question, SubjectType, TestSession


class QuestionSupply(Protocol):
    def fetch_questions(
        self,
        subject: SubjectType,
        tier: Optional[DifficultyTier],
        count: int,
    ) -> Sequence[Question]:
        """Return `count` questions; tier None means any tier."""
        ...


class ResultPersister(Protocol):
    def persist(self, session: TestSession) -> None:
        """Store a finished session. Raise PersistenceError on failure."""
        ...
