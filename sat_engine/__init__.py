# sat_engine/__init__.py

"""
Adaptive test engine for a four-module, SAT style exam.

Components:
- Scoring converter: raw correct counts -> scaled section scores
- Difficulty router: module 1/3 performance -> tier of module 2/4
- Module timer: countdown with 5 and 1 minute warnings and auto-submit
- Answer ledger: per-module answers with dwell-time tracking
- AdaptiveTestEngine: the state machine tying everything together

Commonly used exports:
    AdaptiveTestEngine, TestPhase
    EngineConfig, load_config
    ManualClock, MonotonicClock
    select_difficulty_tier, convert_scores
"""

# Schema models
from .schema import (
    Answer,
    CategoryScore,
    DifficultyTier,
    ModuleConfig,
    ModulePerformance,
    ModuleResult,
    Question,
    ScaledScore,
    SessionStatus,
    SubjectType,
    TestSession,
)

# Errors
from .errors import (
    ConfigError,
    EngineError,
    InvalidTransition,
    PersistenceError,
    QuestionSupplyShortfall,
)

# Configuration
from .config import (
    AppSettings,
    EngineConfig,
    load_config,
    load_settings,
)

# Pure policies
from .router import select_difficulty_tier
from .scoring import ScaleRange, convert_scores, minimum_total, scale_subject
from .performance import compute_module_performance

# Runtime pieces
from .clock import Clock, ManualClock, MonotonicClock
from .timer import ModuleTimer
from .ledger import AnswerLedger
from .events import EventEmitter
from .interfaces import QuestionSupply, ResultPersister
from .state_machine import AdaptiveTestEngine, TestPhase


__all__ = [
    # Schema
    "Answer",
    "CategoryScore",
    "DifficultyTier",
    "ModuleConfig",
    "ModulePerformance",
    "ModuleResult",
    "Question",
    "ScaledScore",
    "SessionStatus",
    "SubjectType",
    "TestSession",

    # Errors
    "ConfigError",
    "EngineError",
    "InvalidTransition",
    "PersistenceError",
    "QuestionSupplyShortfall",

    # Config
    "AppSettings",
    "EngineConfig",
    "load_config",
    "load_settings",

    # Policies
    "select_difficulty_tier",
    "ScaleRange",
    "convert_scores",
    "minimum_total",
    "scale_subject",
    "compute_module_performance",

    # Runtime
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "ModuleTimer",
    "AnswerLedger",
    "EventEmitter",
    "QuestionSupply",
    "ResultPersister",
    "AdaptiveTestEngine",
    "TestPhase",
]
