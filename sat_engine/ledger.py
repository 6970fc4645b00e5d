# sat_engine/ledger.py

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .schema import Answer, Question


class AnswerLedger:
    """
    Answers of the active module, keyed by question id and ordered by
    question index. A new ledger is created for every module.

    Dwell time is counted in clock seconds against whichever question the
    cursor points at, so revisiting a question keeps adding to the same
    entry.
    """

    def __init__(self, questions: Sequence[Question]):
        self._questions = tuple(questions)
        self._index_of: Dict[str, int] = {q.id: i for i, q in enumerate(self._questions)}
        self._selected: Dict[str, int] = {}
        self._dwell: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._selected)

    @property
    def questions(self):
        return self._questions

    def _question_at(self, index: int) -> Question:
        if not 0 <= index < len(self._questions):
            raise IndexError(f"Question index {index} out of range 0..{len(self._questions) - 1}")
        return self._questions[index]

    def select(self, index: int, option_index: int) -> Answer:
        """Upsert the selection for the question at index."""
        q = self._question_at(index)
        if not 0 <= option_index < len(q.options):
            raise ValueError(f"Option index {option_index} out of range for question {q.id}")
        self._selected[q.id] = option_index
        return self._answer_for(q)

    def add_dwell(self, index: int, seconds: int = 1) -> None:
        q = self._question_at(index)
        self._dwell[q.id] = self._dwell.get(q.id, 0) + seconds

    def dwell_seconds(self, index: int) -> int:
        return self._dwell.get(self._question_at(index).id, 0)

    def selected_option(self, index: int) -> Optional[int]:
        return self._selected.get(self._question_at(index).id)

    def answer_for(self, index: int) -> Optional[Answer]:
        q = self._question_at(index)
        if q.id not in self._selected:
            return None
        return self._answer_for(q)

    def _answer_for(self, q: Question) -> Answer:
        selected = self._selected[q.id]
        return Answer(
            question_id=q.id,
            selected_option_index=selected,
            time_spent_seconds=self._dwell.get(q.id, 0),
            is_correct=selected == q.correct_option_index,
        )

    def snapshot(self) -> List[Answer]:
        """Answers in question order, frozen at the time of the call."""
        return [self._answer_for(q) for q in self._questions if q.id in self._selected]
