# content/__init__.py

"""Reference collaborators for the engine: sample bank, question supply, result stores."""

from .distractors import ensure_unique_distractors, make_option_set
from .question_bank import InMemoryQuestionBank, load_bank, save_bank
from .result_store import JsonResultStore, MemoryResultStore, session_to_dict
from .sample_bank import generate_sample_bank

__all__ = [
    "ensure_unique_distractors",
    "make_option_set",
    "InMemoryQuestionBank",
    "load_bank",
    "save_bank",
    "JsonResultStore",
    "MemoryResultStore",
    "session_to_dict",
    "generate_sample_bank",
]
