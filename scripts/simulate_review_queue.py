"""
Simulate review queues over a synthetic vocabulary.

Builds a pool with a spread of familiarity scores and review histories,
draws many queues, and prints how often each familiarity band and the
recent partition show up. Useful for eyeballing the effect of the
recency slider.

Usage:
    python -m scripts.simulate_review_queue --words 200 --queue-size 20 --recency-weight 0.66
"""

from __future__ import annotations

import argparse
import random
from collections import Counter
from datetime import datetime, timedelta, timezone

from vocab_review import ReviewableItem, build_review_pool_state, select_words_for_review
from vocab_review.analytics import compute_review_stats, familiarity_distribution


def build_synthetic_pool(size: int, rng: random.Random, now: datetime) -> list[ReviewableItem]:
    """Random familiarity, review counts, and a last review up to 30 days back (or never)."""
    pool = []
    for word_id in range(1, size + 1):
        times_reviewed = rng.choice([0, 0, 1, 2, 3, 5, 8, 13])
        recent_reviews = ()
        if times_reviewed:
            last = now - timedelta(hours=rng.uniform(0, 24 * 30))
            recent_reviews = (last.isoformat(),)
        pool.append(ReviewableItem(
            id=word_id,
            word=f"word-{word_id}",
            familiarity_score=round(rng.uniform(0, 100), 1) if times_reviewed else 0.0,
            times_reviewed=times_reviewed,
            recent_reviews=recent_reviews,
        ))
    return pool


def main():
    parser = argparse.ArgumentParser(
        description="Simulate review queue selection on a synthetic pool"
    )
    parser.add_argument("--words", type=int, default=200, help="Pool size")
    parser.add_argument("--queue-size", type=int, default=20, help="Words per queue")
    parser.add_argument("--recency-weight", type=float, default=0.5, help="Recency slider (0-1)")
    parser.add_argument("--trials", type=int, default=500, help="Number of queues to draw")
    parser.add_argument("--strategy", choices=["quota", "blended"], default="quota")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    now = datetime.now(timezone.utc)
    pool = build_synthetic_pool(args.words, rng, now)

    stats = compute_review_stats(pool)
    pool_state = build_review_pool_state(pool, now)

    print("=" * 60)
    print("Review Queue Simulation")
    print("=" * 60)
    print(f"Words: {stats.total_words}  Reviewed: {stats.reviewed_words}  "
          f"Avg familiarity: {stats.average_familiarity:.1f}")
    print(f"Recent partition: {len(pool_state.recent)}  Other: {len(pool_state.other)}")
    print("\nPool familiarity bands:")
    for band, n in familiarity_distribution(pool).items():
        print(f"  {band:>7}: {n}")

    band_hits: Counter = Counter()
    recent_hits = 0
    total = 0

    for _ in range(args.trials):
        queue = select_words_for_review(
            pool,
            args.queue_size,
            args.recency_weight,
            rng=rng,
            now=now,
            strategy=args.strategy,
        )
        for item in queue:
            band_hits[min(int(item.familiarity_score // 20), 4)] += 1
            recent_hits += pool_state.status_of(item.id) == "recent"
        total += len(queue)

    print(f"\nSelected over {args.trials} queues ({args.strategy}):")
    for band in range(5):
        share = band_hits[band] / total if total else 0.0
        print(f"  {band * 20:>3}-{band * 20 + 20:<3}: {share:6.1%}")
    print(f"  recent share: {recent_hits / total if total else 0.0:6.1%}")


if __name__ == "__main__":
    main()
