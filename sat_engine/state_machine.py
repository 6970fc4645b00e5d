# sat_engine/state_machine.py

"""
Adaptive test engine.

Phases:

    NOT_STARTED -> MODULE_INTRO(1) -> MODULE_IN_PROGRESS(1) -> MODULE_TRANSITION(1->2)
                -> MODULE_INTRO(2) -> ... -> MODULE_IN_PROGRESS(4) -> COMPLETED

ABANDONED is reachable from every non-terminal phase through abandon().

All commands run on the caller's thread. The module timer is driven by an
injected clock, and its expiry calls submit_module() on that same thread,
so the phase guard alone decides which of a manual submit or an expiry
finalizes the module.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from .clock import Clock
from .config import EngineConfig
from .errors import InvalidTransition, QuestionSupplyShortfall
from .events import (
    EventEmitter,
    MODULE_STARTED,
    MODULE_SUBMITTED,
    TEST_ABANDONED,
    TEST_COMPLETED,
    TICK,
    TIME_WARNING,
)
from .interfaces import QuestionSupply, ResultPersister
from .ledger import AnswerLedger
from .performance import compute_module_performance
from .router import select_difficulty_tier
from .schema import (
    Answer,
    DifficultyTier,
    ModuleConfig,
    ModulePerformance,
    ModuleResult,
    Question,
    SessionStatus,
    TestSession,
)
from .scoring import score_results
from .timer import ModuleTimer

logger = logging.getLogger(__name__)


class TestPhase(str, Enum):
    NOT_STARTED = "not-started"
    MODULE_INTRO = "module-intro"
    MODULE_IN_PROGRESS = "module-in-progress"
    MODULE_TRANSITION = "module-transition"
    COMPLETED = "completed"
    ABANDONED = "abandoned"

    __test__ = False


TERMINAL_PHASES = (TestPhase.COMPLETED, TestPhase.ABANDONED)
LAST_MODULE = 4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AdaptiveTestEngine:
    """State machine for one candidate sitting."""

    def __init__(
        self,
        user_id: str,
        question_supply: QuestionSupply,
        persister: ResultPersister,
        clock: Clock,
        config: Optional[EngineConfig] = None,
        *,
        events: Optional[EventEmitter] = None,
        session_id: Optional[str] = None,
        now: Callable[[], datetime] = _utcnow,
    ):
        self.config = config or EngineConfig()
        self.events = events or EventEmitter()
        self._supply = question_supply
        self._persister = persister
        self._clock = clock
        self._now = now

        self.session = TestSession(
            session_id=session_id or f"test_{uuid.uuid4().hex[:12]}",
            user_id=user_id,
        )

        self._phase = TestPhase.NOT_STARTED
        self._module_id = 0
        self._module_questions: Dict[int, Tuple[Question, ...]] = {}
        self._tiers: Dict[int, DifficultyTier] = {}

        self._ledger: Optional[AnswerLedger] = None
        self._timer: Optional[ModuleTimer] = None
        self._cursor = 0

    # ------------------------------
    # Read-only view
    # ------------------------------
    @property
    def phase(self) -> TestPhase:
        return self._phase

    @property
    def module_id(self) -> int:
        return self._module_id

    @property
    def current_module(self) -> Optional[ModuleConfig]:
        if self._module_id == 0:
            return None
        return self.config.module(self._module_id)

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._module_questions.get(self._module_id, ())

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current_question(self) -> Optional[Question]:
        if self._phase != TestPhase.MODULE_IN_PROGRESS or not self.questions:
            return None
        return self.questions[self._cursor]

    @property
    def selected_option(self) -> Optional[int]:
        if self._ledger is None or not self.questions:
            return None
        return self._ledger.selected_option(self._cursor)

    @property
    def answered_count(self) -> int:
        return len(self._ledger) if self._ledger else 0

    @property
    def progress(self) -> float:
        """Cursor position as a percentage of the module."""
        count = len(self.questions)
        return 100.0 * self._cursor / count if count else 0.0

    @property
    def seconds_remaining(self) -> int:
        if self._timer is None:
            return 0
        return self._timer.remaining_seconds

    @property
    def timer(self) -> Optional[ModuleTimer]:
        return self._timer

    @property
    def last_performance(self) -> Optional[ModulePerformance]:
        if not self.session.module_results:
            return None
        return self.session.module_results[-1].performance

    def tier_for(self, module_id: int) -> Optional[DifficultyTier]:
        return self._tiers.get(module_id)

    def answers(self) -> List[Answer]:
        return self._ledger.snapshot() if self._ledger else []

    # ------------------------------
    # Commands
    # ------------------------------
    def start_test(self) -> None:
        self._require("start_test", TestPhase.NOT_STARTED)

        first = self.config.module(1)
        questions = self._fetch(first, None)

        self.session.start_time = self._now()
        self._module_questions[1] = questions
        self._module_id = 1
        self._phase = TestPhase.MODULE_INTRO
        logger.info(f"🚀 Session {self.session.session_id} started for user {self.session.user_id}")

    def start_module(self, module_id: int) -> None:
        self._require("start_module", TestPhase.MODULE_INTRO)
        if module_id != self._module_id:
            logger.warning(f"start_module({module_id}) rejected: module {self._module_id} is next")
            raise InvalidTransition(f"start_module({module_id})", f"{self._phase.value}({self._module_id})")

        module = self.config.module(module_id)
        self._discard_timer()
        self._ledger = AnswerLedger(self.questions)
        self._cursor = 0
        self._timer = ModuleTimer(
            module.duration_seconds,
            self._clock,
            on_tick=self._on_tick,
            on_warning=self._on_warning,
            on_expired=self._on_expired,
            warning_thresholds=self.config.warning_thresholds,
        )
        self._phase = TestPhase.MODULE_IN_PROGRESS
        self._timer.start()

        logger.info(
            f"▶️ Module {module_id} started ({module.subject.value}, "
            f"{len(self.questions)} questions, {module.duration_seconds}s)"
        )
        self.events.emit(MODULE_STARTED, module)

    def select_answer(self, question_index: int, option_index: int) -> Answer:
        self._require_open("select_answer")
        return self._ledger.select(question_index, option_index)

    def next_question(self) -> int:
        self._require_open("next_question")
        self._cursor = min(self._cursor + 1, max(len(self.questions) - 1, 0))
        return self._cursor

    def previous_question(self) -> int:
        self._require_open("previous_question")
        self._cursor = max(self._cursor - 1, 0)
        return self._cursor

    def go_to_question(self, question_index: int) -> int:
        """Jump the cursor, clamped to the module."""
        self._require_open("go_to_question")
        self._cursor = min(max(question_index, 0), max(len(self.questions) - 1, 0))
        return self._cursor

    def submit_module(self) -> Optional[ModuleResult]:
        """
        Finalize the active module. Returns None when the module was already
        finalized (expiry and manual submit race on the same module).
        """
        if self._phase in (TestPhase.MODULE_TRANSITION, TestPhase.COMPLETED):
            logger.debug(f"submit_module ignored: module {self._module_id} already submitted")
            return None
        self._require("submit_module", TestPhase.MODULE_IN_PROGRESS)

        n = self._module_id
        module = self.config.module(n)
        time_used = self._timer.elapsed_seconds
        answers = self._ledger.snapshot()
        performance = compute_module_performance(
            self.questions,
            answers,
            time_used,
            min_questions=self.config.area_min_questions,
            strong_percent=self.config.strong_area_percent,
            weak_percent=self.config.weak_area_percent,
            limit=self.config.max_areas,
        )
        result = ModuleResult(
            module_id=n,
            subject=module.subject,
            difficulty_tier=self._tiers.get(n),
            answers=tuple(answers),
            performance=performance,
            completed_at=self._now(),
            questions=self.questions,
        )

        # Everything that can fail happens before the session is touched
        next_tier: Optional[DifficultyTier] = None
        next_questions: Tuple[Question, ...] = ()
        if n < LAST_MODULE:
            following = self.config.module(n + 1)
            if following.is_adaptive:
                next_tier = select_difficulty_tier(
                    performance,
                    hard_threshold=self.config.hard_threshold,
                    medium_threshold=self.config.medium_threshold,
                )
                logger.info(
                    f"🧭 Module {n}: {performance.questions_correct}/{performance.total_questions} correct "
                    f"-> module {n + 1} tier {next_tier.value}"
                )
            next_questions = self._fetch(following, next_tier)

        self._discard_timer()
        self._ledger = None
        self.session.module_results.append(result)
        self.session.total_time_spent += time_used
        logger.info(f"📥 Module {n} submitted in {time_used}s")

        if n == LAST_MODULE:
            self._complete()
            try:
                self._persister.persist(self.session)
            finally:
                self.events.emit(MODULE_SUBMITTED, result)
                self.events.emit(TEST_COMPLETED, self.session)
            return result

        if next_tier is not None:
            self._tiers[n + 1] = next_tier
        self._module_questions[n + 1] = next_questions
        self._phase = TestPhase.MODULE_TRANSITION
        self.events.emit(MODULE_SUBMITTED, result)
        return result

    def continue_to_next_module(self) -> None:
        self._require("continue_to_next_module", TestPhase.MODULE_TRANSITION)
        self._module_id += 1
        self._cursor = 0
        self._phase = TestPhase.MODULE_INTRO
        logger.info(f"➡️ Module {self._module_id} intro")

    def abandon(self) -> None:
        if self._phase in TERMINAL_PHASES:
            logger.warning(f"abandon rejected in phase {self._phase.value}")
            raise InvalidTransition("abandon", self._phase.value)

        self._discard_timer()
        self._ledger = None
        now = self._now()
        if self.session.start_time is None:
            self.session.start_time = now
        self.session.end_time = now
        self.session.status = SessionStatus.ABANDONED
        self._phase = TestPhase.ABANDONED
        logger.info(
            f"🛑 Session {self.session.session_id} abandoned after "
            f"{len(self.session.module_results)} module(s)"
        )
        try:
            self._persister.persist(self.session)
        finally:
            self.events.emit(TEST_ABANDONED, self.session)

    # ------------------------------
    # Internals
    # ------------------------------
    def _require(self, operation: str, phase: TestPhase) -> None:
        if self._phase != phase:
            logger.warning(f"{operation} rejected in phase {self._phase.value}")
            raise InvalidTransition(operation, self._phase.value)

    def _require_open(self, operation: str) -> None:
        # After expiry only submit_module() is accepted
        self._require(operation, TestPhase.MODULE_IN_PROGRESS)
        if self._timer is not None and self._timer.has_expired:
            logger.warning(f"{operation} rejected: module {self._module_id} time expired")
            raise InvalidTransition(operation, "module-expired")

    def _fetch(self, module: ModuleConfig, tier: Optional[DifficultyTier]) -> Tuple[Question, ...]:
        questions = tuple(self._supply.fetch_questions(module.subject, tier, module.question_count))
        if len(questions) < module.question_count:
            logger.error(
                f"❌ Module {module.module_id}: bank returned {len(questions)}/{module.question_count} questions"
            )
            raise QuestionSupplyShortfall(module.module_id, module.question_count, len(questions))
        if len(questions) > module.question_count:
            logger.warning(
                f"Module {module.module_id}: bank returned {len(questions)} questions, "
                f"keeping the first {module.question_count}"
            )
            questions = questions[:module.question_count]
        logger.info(
            f"📚 Module {module.module_id}: fetched {len(questions)} {module.subject.value} questions "
            f"(tier={tier.value if tier else 'mixed'})"
        )
        return questions

    def _complete(self) -> None:
        score = score_results(self.session.module_results, self.config.scale)
        self.session.scaled_score = score
        self.session.overall_score = score.total
        self.session.status = SessionStatus.COMPLETED
        self.session.end_time = self._now()
        self._phase = TestPhase.COMPLETED
        logger.info(
            f"🏁 Session {self.session.session_id} completed: "
            f"verbal={score.verbal} quant={score.quantitative} total={score.total}"
        )

    def _discard_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _on_tick(self, remaining: int) -> None:
        if self._ledger is not None and self.questions:
            self._ledger.add_dwell(self._cursor)
        self.events.emit(TICK, remaining)

    def _on_warning(self, remaining: int) -> None:
        self.events.emit(TIME_WARNING, remaining)

    def _on_expired(self) -> None:
        logger.info(f"⏰ Module {self._module_id} time expired, auto-submitting")
        self.submit_module()
