# tests/test_performance.py

from sat_engine import Answer, CategoryScore, DifficultyTier, SubjectType, compute_module_performance
from sat_engine.performance import category_scores, rank_areas

from conftest import make_question


def _questions():
    cats = ["algebra"] * 4 + ["geometry"] * 4 + ["statistics"] * 2
    return [
        make_question(f"q{i}", SubjectType.QUANTITATIVE, DifficultyTier.MEDIUM, cat)
        for i, cat in enumerate(cats)
    ]


def _answer(qid, correct=True, seconds=10):
    return Answer(question_id=qid, selected_option_index=0 if correct else 1, time_spent_seconds=seconds, is_correct=correct)


def test_unanswered_questions_count_against_category():
    qs = _questions()
    scores = category_scores(qs, [_answer("q0"), _answer("q1", correct=False)])
    assert scores["algebra"] == CategoryScore(correct=1, total=4)
    assert scores["geometry"] == CategoryScore(correct=0, total=4)


def test_strong_and_weak_areas():
    qs = _questions()
    answers = [_answer(f"q{i}") for i in range(4)]          # algebra 4/4
    answers += [_answer("q4"), _answer("q5")]               # geometry 2/4
    answers += [_answer("q8")]                              # statistics 1/2, too few to rank
    perf = compute_module_performance(qs, answers, time_used_seconds=300)

    assert perf.questions_correct == 7
    assert perf.total_questions == 10
    assert perf.score_fraction == 0.7
    assert perf.strong_areas == ("algebra",)
    assert perf.weak_areas == ("geometry",)
    assert perf.average_time_per_question == 30.0


def test_rank_areas_sorts_and_caps():
    scores = {
        "a": CategoryScore(3, 3),
        "b": CategoryScore(3, 4),
        "c": CategoryScore(4, 5),
        "d": CategoryScore(9, 10),
        "e": CategoryScore(0, 3),
        "f": CategoryScore(1, 3),
    }
    strong, weak = rank_areas(scores, limit=3)
    assert strong == ("a", "d", "c")
    assert weak == ("e", "f")


def test_empty_module():
    perf = compute_module_performance([], [], time_used_seconds=42)
    assert perf.total_questions == 0
    assert perf.score_fraction == 0.0
    assert perf.average_time_per_question == 0.0
    assert perf.time_used_seconds == 42
