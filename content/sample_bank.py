"""
Synthetic question bank used by the CLI and the cohort simulation.

Math items are generated from small templates with computed distractors.
Reading & Writing items are placeholders built from a short word list,
enough to drive the engine end to end.
"""

import random
from typing import Callable, Dict, List, Tuple

from sat_engine.schema import DifficultyTier, Question, SubjectType

from .distractors import ensure_unique_distractors, make_option_set

GeneratedItem = Tuple[str, str, Tuple[str, ...], int, str]  # category, prompt, options, correct, explanation

# ============================
# Quantitative templates
# ============================

def gen_linear_equation(rng: random.Random) -> GeneratedItem:
    # ax + b = c
    a = rng.randint(2, 9)
    x_true = rng.randint(-6, 12)
    b = rng.randint(-12, 12)
    c = a * x_true + b
    prompt = f"If {a}x {'+' if b >= 0 else '-'} {abs(b)} = {c}, what is the value of x?"
    distractors = ensure_unique_distractors(x_true, [x_true + a, x_true - a, c - b])
    options, idx = make_option_set(str(x_true), distractors, rng)
    return "algebra", prompt, options, idx, f"Subtract {b} from both sides, then divide by {a}."


def gen_ratio_word_problem(rng: random.Random) -> GeneratedItem:
    a = rng.randint(2, 7)
    b = rng.randint(3, 9)
    unit = rng.randint(2, 10)
    total = (a + b) * unit
    part_a = a * unit
    prompt = f"The ratio of A to B is {a}:{b}. If A + B = {total}, what is A?"
    distractors = ensure_unique_distractors(part_a, [total - part_a, part_a + a, part_a - b])
    options, idx = make_option_set(str(part_a), distractors, rng)
    return "problem-solving", prompt, options, idx, f"Each part is {total} / {a + b} = {unit}."


def gen_rectangle_area(rng: random.Random) -> GeneratedItem:
    w = rng.randint(2, 15)
    h = rng.randint(2, 15)
    area = w * h
    prompt = f"A rectangle has width {w} and height {h}. What is its area?"
    distractors = ensure_unique_distractors(area, [2 * (w + h), w + h, area + w])
    options, idx = make_option_set(str(area), distractors, rng)
    return "geometry", prompt, options, idx, "Area of a rectangle is width times height."


def gen_quadratic_value(rng: random.Random) -> GeneratedItem:
    # f(x) = x^2 + px + q ; evaluate f(k)
    p = rng.randint(-6, 6)
    q = rng.randint(-8, 8)
    k = rng.randint(-5, 7)
    correct = k * k + p * k + q
    prompt = f"Let f(x) = x² {'+' if p >= 0 else '-'} {abs(p)}x {'+' if q >= 0 else '-'} {abs(q)}. What is f({k})?"
    distractors = ensure_unique_distractors(
        correct, [k * k + (p + 1) * k + q, k * k + p * (k + 1) + q, k * k + p * k + (q + 1)]
    )
    options, idx = make_option_set(str(correct), distractors, rng)
    return "advanced-math", prompt, options, idx, f"Substitute x = {k}."


def gen_percent_change(rng: random.Random) -> GeneratedItem:
    base = rng.choice([40, 60, 80, 120, 160, 200, 240, 300])
    pct = rng.choice([5, 10, 15, 20, 25])
    up = rng.choice([True, False])
    new_val = base * (100 + pct) // 100 if up else base * (100 - pct) // 100
    prompt = f"A value {'increases' if up else 'decreases'} by {pct}% from {base}. What is the new value?"
    distractors = ensure_unique_distractors(
        new_val, [base * (100 - pct) // 100 if up else base * (100 + pct) // 100, base, base + pct]
    )
    options, idx = make_option_set(str(new_val), distractors, rng)
    return "problem-solving", prompt, options, idx, f"Multiply {base} by {(100 + pct) if up else (100 - pct)}%."


def gen_systems_of_equations(rng: random.Random) -> GeneratedItem:
    # x + y = s ; x - y = d
    x = rng.randint(-6, 10)
    y = rng.randint(-6, 10)
    s, d = x + y, x - y
    prompt = f"If x + y = {s} and x - y = {d}, what is the value of x?"
    distractors = ensure_unique_distractors(x, [y, s, d])
    options, idx = make_option_set(str(x), distractors, rng)
    return "algebra", prompt, options, idx, "Add the two equations: 2x = s + d."


def gen_quadratic_roots_sum(rng: random.Random) -> GeneratedItem:
    r1 = rng.randint(-7, 7)
    r2 = rng.randint(-7, 7)
    b, c = -(r1 + r2), r1 * r2
    prompt = (
        f"What is the sum of the solutions of x² {'+' if b >= 0 else '-'} {abs(b)}x "
        f"{'+' if c >= 0 else '-'} {abs(c)} = 0?"
    )
    correct = r1 + r2
    distractors = ensure_unique_distractors(correct, [-correct, c, r1 * r2 + 1])
    options, idx = make_option_set(str(correct), distractors, rng)
    return "advanced-math", prompt, options, idx, "By Vieta's formulas the sum is -b/a."


# ============================
# Verbal templates
# ============================

VOCABULARY = {
    "meticulous": "showing great attention to detail",
    "ephemeral": "lasting a very short time",
    "candid": "truthful and straightforward",
    "lucid": "clearly expressed",
    "tenacious": "holding firmly to a purpose",
    "austere": "severe or strict in manner",
    "prolific": "producing much work",
    "ambivalent": "having mixed feelings",
    "pragmatic": "dealing with things sensibly",
    "scrutinize": "examine closely",
}

TRANSITIONS = {
    "contrast": ("However", ["Therefore", "For example", "Similarly"]),
    "result": ("Therefore", ["However", "Meanwhile", "For instance"]),
    "addition": ("Moreover", ["Nevertheless", "Instead", "In contrast"]),
    "example": ("For example", ["Consequently", "Nonetheless", "Otherwise"]),
}

PASSAGE_TOPICS = [
    ("coral reefs", "explain why reef ecosystems are sensitive to warming water"),
    ("early printing presses", "describe how printing changed the spread of ideas"),
    ("urban beekeeping", "argue that city hives can support local pollinators"),
    ("deep-sea vents", "present evidence that life can thrive without sunlight"),
]


def gen_vocabulary(rng: random.Random) -> GeneratedItem:
    word = rng.choice(sorted(VOCABULARY))
    meaning = VOCABULARY[word]
    others = [m for w, m in sorted(VOCABULARY.items()) if w != word]
    rng.shuffle(others)
    distractors = ensure_unique_distractors(meaning, others)
    options, idx = make_option_set(meaning, distractors, rng)
    return "vocabulary", f'As used in the text, "{word}" most nearly means:', options, idx, f'"{word}" means {meaning}.'


def gen_transition(rng: random.Random) -> GeneratedItem:
    relation = rng.choice(sorted(TRANSITIONS))
    correct, wrong = TRANSITIONS[relation]
    distractors = ensure_unique_distractors(correct, wrong)
    options, idx = make_option_set(correct, distractors, rng)
    prompt = f"Which choice completes the text with the most logical transition ({relation})?"
    return "grammar", prompt, options, idx, f'"{correct}" signals {relation}.'


def gen_main_purpose(rng: random.Random) -> GeneratedItem:
    topic, purpose = rng.choice(PASSAGE_TOPICS)
    wrong = [p for t, p in PASSAGE_TOPICS if t != topic]
    distractors = ensure_unique_distractors(f"To {purpose}", [f"To {p}" for p in wrong])
    options, idx = make_option_set(f"To {purpose}", distractors, rng)
    prompt = f"Which choice best states the main purpose of the passage about {topic}?"
    return "reading-comprehension", prompt, options, idx, f"The passage sets out to {purpose}."


def gen_sentence_boundary(rng: random.Random) -> GeneratedItem:
    subject = rng.choice(["The committee", "The researchers", "The orchestra", "The city council"])
    correct = f"{subject} met on Monday; the vote followed on Tuesday."
    distractors = [
        f"{subject} met on Monday, the vote followed on Tuesday.",
        f"{subject} met on Monday the vote followed on Tuesday.",
        f"{subject} met on Monday, and, the vote followed on Tuesday.",
    ]
    options, idx = make_option_set(correct, distractors, rng)
    return "writing-skills", "Which choice conforms to the conventions of Standard English?", options, idx, (
        "A semicolon joins two independent clauses."
    )


GENERATORS: Dict[SubjectType, Dict[DifficultyTier, List[Callable[[random.Random], GeneratedItem]]]] = {
    SubjectType.QUANTITATIVE: {
        DifficultyTier.EASY: [gen_linear_equation, gen_rectangle_area, gen_ratio_word_problem],
        DifficultyTier.MEDIUM: [gen_quadratic_value, gen_percent_change, gen_ratio_word_problem],
        DifficultyTier.HARD: [gen_systems_of_equations, gen_quadratic_roots_sum, gen_quadratic_value],
    },
    SubjectType.VERBAL: {
        DifficultyTier.EASY: [gen_vocabulary, gen_transition],
        DifficultyTier.MEDIUM: [gen_transition, gen_main_purpose, gen_sentence_boundary],
        DifficultyTier.HARD: [gen_main_purpose, gen_sentence_boundary, gen_vocabulary],
    },
}

TIME_ESTIMATES = {DifficultyTier.EASY: 45, DifficultyTier.MEDIUM: 70, DifficultyTier.HARD: 95}


# ============================
# Batch generation API
# ============================

def generate_sample_bank(seed: int = 2025, per_tier: int = 60) -> List[Question]:
    """
    per_tier questions for every (subject, tier) pair, shuffled with the seed
    so that an untiered fetch draws a mix of difficulties.
    """
    rng = random.Random(seed)
    bank: List[Question] = []
    for subject, tiers in GENERATORS.items():
        prefix = "rw" if subject == SubjectType.VERBAL else "m"
        for tier, gens in tiers.items():
            for k in range(per_tier):
                gen = gens[k % len(gens)]
                category, prompt, options, idx, explanation = gen(rng)
                passage = None
                if category == "reading-comprehension":
                    passage = "Sample passage for reading comprehension questions..."
                bank.append(Question(
                    id=f"{prefix}-{tier.value}-{k + 1}",
                    subject=subject,
                    difficulty=tier,
                    category=category,
                    prompt=prompt,
                    options=options,
                    correct_option_index=idx,
                    explanation=explanation,
                    passage=passage,
                    time_estimate_seconds=TIME_ESTIMATES[tier],
                ))
    rng.shuffle(bank)
    return bank
