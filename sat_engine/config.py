# sat_engine/config.py

"""
Engine configuration.

Defaults follow the digital SAT layout: two Reading & Writing modules
(27 questions, 32 minutes) then two Math modules (22 questions, 35 minutes).
A project level .env may override counts, durations and a few runtime
settings, e.g.

    SAT_VERBAL_QUESTIONS=27
    SAT_VERBAL_MINUTES=32
    SAT_QUANT_QUESTIONS=22
    SAT_QUANT_MINUTES=35
    SAT_RESULTS_DIR=results
    SAT_BANK_SEED=2025
    SAT_LOG_LEVEL=INFO
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from .errors import ConfigError
from .router import HARD_THRESHOLD, MEDIUM_THRESHOLD
from .schema import ModuleConfig, SubjectType
from .scoring import DEFAULT_SCALE, ScaleRange

ROOT = pathlib.Path(__file__).resolve().parent.parent
ENV_FILE = ROOT / ".env"

WARNING_THRESHOLDS = (300, 60)


def build_modules(
    verbal_questions: int = 27,
    verbal_minutes: float = 32,
    quant_questions: int = 22,
    quant_minutes: float = 35,
) -> Tuple[ModuleConfig, ...]:
    verbal_seconds = int(round(verbal_minutes * 60))
    quant_seconds = int(round(quant_minutes * 60))
    return (
        ModuleConfig(
            module_id=1,
            subject=SubjectType.VERBAL,
            question_count=verbal_questions,
            duration_seconds=verbal_seconds,
            title="Reading and Writing - Module 1",
            description="Reading comprehension, grammar and writing skills.",
        ),
        ModuleConfig(
            module_id=2,
            subject=SubjectType.VERBAL,
            question_count=verbal_questions,
            duration_seconds=verbal_seconds,
            title="Reading and Writing - Module 2",
            description="Difficulty adapts to your Module 1 performance.",
        ),
        ModuleConfig(
            module_id=3,
            subject=SubjectType.QUANTITATIVE,
            question_count=quant_questions,
            duration_seconds=quant_seconds,
            title="Math - Module 1",
            description="Algebra, advanced math, problem solving and geometry.",
        ),
        ModuleConfig(
            module_id=4,
            subject=SubjectType.QUANTITATIVE,
            question_count=quant_questions,
            duration_seconds=quant_seconds,
            title="Math - Module 2",
            description="Difficulty adapts to your Math Module 1 performance.",
        ),
    )


DEFAULT_MODULES = build_modules()


@dataclass(frozen=True)
class EngineConfig:
    modules: Tuple[ModuleConfig, ...] = DEFAULT_MODULES
    warning_thresholds: Tuple[int, ...] = WARNING_THRESHOLDS
    hard_threshold: float = HARD_THRESHOLD
    medium_threshold: float = MEDIUM_THRESHOLD
    scale: ScaleRange = DEFAULT_SCALE

    # Category aggregation for strong / weak areas
    area_min_questions: int = 3
    strong_area_percent: float = 75.0
    weak_area_percent: float = 60.0
    max_areas: int = 3

    def __post_init__(self) -> None:
        if [m.module_id for m in self.modules] != [1, 2, 3, 4]:
            raise ConfigError("Exactly four modules with ids 1..4 are required")
        expected = [SubjectType.VERBAL, SubjectType.VERBAL, SubjectType.QUANTITATIVE, SubjectType.QUANTITATIVE]
        if [m.subject for m in self.modules] != expected:
            raise ConfigError("Modules 1-2 must be verbal and modules 3-4 quantitative")
        for m in self.modules:
            if m.question_count < 0:
                raise ConfigError(f"Module {m.module_id}: question_count must be >= 0")
            if m.duration_seconds <= 0:
                raise ConfigError(f"Module {m.module_id}: duration must be positive")
        if not 0.0 <= self.medium_threshold <= self.hard_threshold <= 1.0:
            raise ConfigError("Router thresholds must satisfy 0 <= medium <= hard <= 1")

    def module(self, module_id: int) -> ModuleConfig:
        if not 1 <= module_id <= len(self.modules):
            raise ConfigError(f"Unknown module id {module_id}")
        return self.modules[module_id - 1]

    @property
    def total_questions(self) -> int:
        return sum(m.question_count for m in self.modules)

    @property
    def total_seconds(self) -> int:
        return sum(m.duration_seconds for m in self.modules)


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings for the command-line front ends."""
    results_dir: str = "results"
    bank_seed: int = 2025
    log_level: str = "INFO"


# ============================
# Environment loading
# ============================

def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


def load_config(env_file: Optional[pathlib.Path] = None) -> EngineConfig:
    load_dotenv(env_file or ENV_FILE)
    modules = build_modules(
        verbal_questions=_env_int("SAT_VERBAL_QUESTIONS", 27),
        verbal_minutes=_env_float("SAT_VERBAL_MINUTES", 32),
        quant_questions=_env_int("SAT_QUANT_QUESTIONS", 22),
        quant_minutes=_env_float("SAT_QUANT_MINUTES", 35),
    )
    return EngineConfig(modules=modules)


def load_settings(env_file: Optional[pathlib.Path] = None) -> AppSettings:
    load_dotenv(env_file or ENV_FILE)
    return AppSettings(
        results_dir=os.getenv("SAT_RESULTS_DIR", "results"),
        bank_seed=_env_int("SAT_BANK_SEED", 2025),
        log_level=os.getenv("SAT_LOG_LEVEL", "INFO").upper(),
    )
