# sat_engine/router.py

from .schema import DifficultyTier, ModulePerformance

HARD_THRESHOLD = 0.70
MEDIUM_THRESHOLD = 0.40


def select_difficulty_tier(
    performance: ModulePerformance,
    hard_threshold: float = HARD_THRESHOLD,
    medium_threshold: float = MEDIUM_THRESHOLD,
) -> DifficultyTier:
    """
    Tier of the follow-up module from the first module of the same subject.

        fraction >= 0.70         -> hard
        0.40 <= fraction < 0.70  -> medium
        fraction < 0.40          -> easy

    An empty module routes to medium.
    """
    if performance.total_questions <= 0:
        return DifficultyTier.MEDIUM

    fraction = performance.questions_correct / performance.total_questions
    if fraction >= hard_threshold:
        return DifficultyTier.HARD
    if fraction >= medium_threshold:
        return DifficultyTier.MEDIUM
    return DifficultyTier.EASY
