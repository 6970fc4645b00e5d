"""Persistence collaborators for finished test sessions."""

import json
import logging
import os
from dataclasses import asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from sat_engine.errors import PersistenceError
from sat_engine.schema import TestSession

logger = logging.getLogger(__name__)


def _encode(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Cannot serialise {type(value).__name__}")


def session_to_dict(session: TestSession) -> Dict[str, Any]:
    """Plain JSON-ready dict of a session (enums as values, datetimes as ISO strings)."""
    return json.loads(json.dumps(asdict(session), default=_encode))


class JsonResultStore:
    """Writes one <session_id>.json file per session under results_dir."""

    def __init__(self, results_dir: str = "results"):
        self.results_dir = results_dir

    def path_for(self, session_id: str) -> str:
        return os.path.join(self.results_dir, f"{session_id}.json")

    def persist(self, session: TestSession) -> None:
        path = self.path_for(session.session_id)
        try:
            os.makedirs(self.results_dir, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(session_to_dict(session), f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"🚫 Could not write {path}: {e}")
            raise PersistenceError(session.session_id, e) from e
        logger.info(f"✅ Session saved: {path}")

    def load(self, session_id: str) -> Dict[str, Any]:
        with open(self.path_for(session_id), "r", encoding="utf-8") as f:
            return json.load(f)


class MemoryResultStore:
    """Keeps persisted sessions in a list (simulations and tests)."""

    def __init__(self) -> None:
        self.saved: List[TestSession] = []

    def persist(self, session: TestSession) -> None:
        self.saved.append(session)
