# sat_engine/errors.py

from typing import Optional


class EngineError(Exception):
    """Base class for every error raised by the test engine."""


class InvalidTransition(EngineError):
    """An operation was called from a phase that does not allow it."""

    def __init__(self, operation: str, phase: str):
        super().__init__(f"'{operation}' is not allowed in phase {phase}")
        self.operation = operation
        self.phase = phase


class QuestionSupplyShortfall(EngineError):
    """The question bank returned fewer questions than a module needs."""

    def __init__(self, module_id: int, requested: int, received: int):
        super().__init__(
            f"Module {module_id} needs {requested} questions, bank returned {received}"
        )
        self.module_id = module_id
        self.requested = requested
        self.received = received


class PersistenceError(EngineError):
    """Saving a finished session failed. The session stays in memory."""

    def __init__(self, session_id: str, cause: Optional[BaseException] = None):
        super().__init__(f"Could not persist session {session_id}: {cause}")
        self.session_id = session_id
        self.cause = cause


class ConfigError(EngineError):
    """Invalid engine configuration or environment override."""
