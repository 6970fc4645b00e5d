# sat_engine/schema.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple


# ============================
# Enumerations
# ============================

class SubjectType(str, Enum):
    VERBAL = "verbal"
    QUANTITATIVE = "quantitative"


class DifficultyTier(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class SessionStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


# ============================
# Question bank records
# ============================

@dataclass(frozen=True)
class Question:
    """
    A multiple-choice question as issued to a module.
    - options always has exactly 4 entries
    - passage is only set for reading questions
    """
    id: str
    subject: SubjectType
    difficulty: DifficultyTier
    category: str
    prompt: str
    options: Tuple[str, ...]
    correct_option_index: int
    explanation: str = ""
    passage: Optional[str] = None
    time_estimate_seconds: Optional[int] = None

    def __post_init__(self) -> None:
        if len(self.options) != 4:
            raise ValueError(f"Question {self.id} must have 4 options, got {len(self.options)}")
        if not 0 <= self.correct_option_index < len(self.options):
            raise ValueError(f"Question {self.id} has invalid correct_option_index {self.correct_option_index}")


@dataclass(frozen=True)
class Answer:
    question_id: str
    selected_option_index: int
    time_spent_seconds: int
    is_correct: bool


@dataclass(frozen=True)
class ModuleConfig:
    """Static layout of one of the four modules."""
    module_id: int
    subject: SubjectType
    question_count: int
    duration_seconds: int
    title: str = ""
    description: str = ""

    @property
    def duration_minutes(self) -> float:
        return self.duration_seconds / 60

    @property
    def is_adaptive(self) -> bool:
        # Modules 2 and 4 are routed on the preceding module of the same subject
        return self.module_id % 2 == 0


# ============================
# Derived results
# ============================

@dataclass(frozen=True)
class CategoryScore:
    correct: int = 0
    total: int = 0

    @property
    def percentage(self) -> float:
        return 100.0 * self.correct / self.total if self.total else 0.0


@dataclass(frozen=True)
class ModulePerformance:
    score_fraction: float
    time_used_seconds: int
    questions_correct: int
    total_questions: int
    strong_areas: Tuple[str, ...] = ()
    weak_areas: Tuple[str, ...] = ()
    average_time_per_question: float = 0.0
    category_scores: Dict[str, CategoryScore] = field(default_factory=dict)


@dataclass(frozen=True)
class ModuleResult:
    module_id: int
    subject: SubjectType
    difficulty_tier: Optional[DifficultyTier]
    answers: Tuple[Answer, ...]
    performance: ModulePerformance
    completed_at: datetime
    questions: Tuple[Question, ...] = ()


@dataclass(frozen=True)
class ScaledScore:
    verbal: int
    quantitative: int
    total: int


@dataclass
class TestSession:
    """
    Root aggregate of one candidate sitting.
    Mutated only by the engine that owns it.
    """
    session_id: str
    user_id: str
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    module_results: List[ModuleResult] = field(default_factory=list)
    overall_score: int = 0
    total_time_spent: int = 0
    status: SessionStatus = SessionStatus.IN_PROGRESS
    scaled_score: Optional[ScaledScore] = None

    # pytest would otherwise try to collect this class from test modules
    __test__ = False

    def result_for(self, module_id: int) -> Optional[ModuleResult]:
        return next((r for r in self.module_results if r.module_id == module_id), None)
