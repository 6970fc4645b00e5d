from __future__ import annotations
import random
from typing import List, Optional, Sequence, Tuple, Union


def ensure_unique_distractors(
    correct_value: Union[int, float, str],
    candidates: Sequence[Union[int, float, str]],
    max_distractors: int = 3,
    fillers: Sequence[str] = ("None of the above", "Cannot be determined", "Not enough information"),
) -> List[str]:
    """
    Pick up to 3 distinct distractors different from the correct answer.
    Numeric answers are padded with neighbouring values, text answers with
    the fillers, so the result always has max_distractors entries.
    """
    seen = {str(correct_value)}
    uniq: List[str] = []

    for value in candidates:
        s = str(value)
        if s not in seen:
            uniq.append(s)
            seen.add(s)
        if len(uniq) >= max_distractors:
            break

    if isinstance(correct_value, (int, float)):
        base = int(correct_value)
        k = 1
        while len(uniq) < max_distractors:
            for cand in (base + k, base - k):
                s = str(cand)
                if s not in seen:
                    uniq.append(s)
                    seen.add(s)
                    if len(uniq) >= max_distractors:
                        break
            k += 1
    else:
        for filler in fillers:
            if len(uniq) >= max_distractors:
                break
            if filler not in seen:
                uniq.append(filler)
                seen.add(filler)
        if len(uniq) < max_distractors:
            raise ValueError("Not enough distinct distractors for a text answer")

    return uniq


def make_option_set(
    correct: str,
    distractors: Sequence[str],
    rng: Optional[random.Random] = None,
) -> Tuple[Tuple[str, ...], int]:
    """
    Shuffle the correct answer in with 3 distractors.
    Returns (options, correct_option_index).
    """
    rng = rng or random.Random()
    pool = [correct] + list(distractors[:3])
    if len(pool) != 4:
        raise ValueError("An option set needs exactly 3 distractors")
    rng.shuffle(pool)
    return tuple(pool), pool.index(correct)
