"""
Run a cohort of simulated candidates through the engine on a virtual clock
and summarise tier routing and scaled scores.

Run: python -m cli.simulate_cohort --candidates 200 --seed 7
"""

import argparse
import logging
import random
from collections import Counter
from statistics import mean
from typing import Dict, List

from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from content import InMemoryQuestionBank, MemoryResultStore, generate_sample_bank
from sat_engine import (
    AdaptiveTestEngine,
    EngineConfig,
    ManualClock,
    Question,
    TestPhase,
    TestSession,
    load_config,
)

console = Console()


def simulate_candidate(
    candidate_id: str,
    accuracy: float,
    pool: List[Question],
    config: EngineConfig,
    rng: random.Random,
    store: MemoryResultStore,
    seconds_per_question: int = 60,
) -> TestSession:
    """
    One candidate answering every question with probability `accuracy`
    of being correct and a random dwell time around seconds_per_question.
    """
    clock = ManualClock()
    bank = InMemoryQuestionBank(pool)
    engine = AdaptiveTestEngine(candidate_id, bank, store, clock, config)
    engine.start_test()

    while engine.phase not in (TestPhase.COMPLETED, TestPhase.ABANDONED):
        if engine.phase == TestPhase.MODULE_INTRO:
            engine.start_module(engine.module_id)
        elif engine.phase == TestPhase.MODULE_TRANSITION:
            engine.continue_to_next_module()
        else:
            module_id = engine.module_id
            for index, q in enumerate(engine.questions):
                clock.advance(rng.randint(seconds_per_question // 2, seconds_per_question * 3 // 2))
                if engine.phase != TestPhase.MODULE_IN_PROGRESS or engine.module_id != module_id:
                    break
                if rng.random() < accuracy:
                    option = q.correct_option_index
                else:
                    option = (q.correct_option_index + rng.randint(1, 3)) % 4
                engine.select_answer(index, option)
                engine.next_question()
            # Module may already be closed by the timer
            engine.submit_module()

    return engine.session


def summarize(sessions: List[TestSession]) -> None:
    routing: Dict[int, Counter] = {2: Counter(), 4: Counter()}
    for s in sessions:
        for r in s.module_results:
            if r.module_id in routing and r.difficulty_tier is not None:
                routing[r.module_id][r.difficulty_tier.value] += 1

    table = Table(title="Adaptive routing")
    table.add_column("Module")
    for tier in ("easy", "medium", "hard"):
        table.add_column(tier, justify="right")
    for module_id, counts in routing.items():
        table.add_row(str(module_id), *(str(counts.get(t, 0)) for t in ("easy", "medium", "hard")))
    console.print(table)

    totals = [s.overall_score for s in sessions]
    if totals:
        console.print(
            f"Scaled total: mean={mean(totals):.0f} min={min(totals)} max={max(totals)} "
            f"(n={len(totals)})"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate a cohort of candidates through the adaptive test.")
    parser.add_argument("--candidates", type=int, default=100, help="Number of simulated candidates (default 100)")
    parser.add_argument("--seed", type=int, default=2025, help="Random seed (default 2025)")
    parser.add_argument("--min-accuracy", type=float, default=0.1, help="Lowest candidate accuracy (default 0.1)")
    parser.add_argument("--max-accuracy", type=float, default=0.95, help="Highest candidate accuracy (default 0.95)")
    parser.add_argument("--pace", type=int, default=60, help="Average seconds per question (default 60)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="[%(asctime)s] %(levelname)s - %(message)s")

    rng = random.Random(args.seed)
    config = load_config()
    pool = generate_sample_bank(seed=args.seed)
    store = MemoryResultStore()

    sessions = []
    for k in tqdm(range(args.candidates), desc="Simulating"):
        accuracy = rng.uniform(args.min_accuracy, args.max_accuracy)
        sessions.append(simulate_candidate(f"sim-{k + 1}", accuracy, pool, config, rng, store, args.pace))

    summarize(sessions)


if __name__ == "__main__":
    main()
