from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RetrievalMetrics:
    n: int
    hit_at_1: float
    hit_at_3: float
    hit_at_5: float
    mrr: float
    avg_first_rank: float | None


def compute_metrics(first_ranks: list[int | None]) -> RetrievalMetrics:
    """Aggregate the 1-based rank of the first correct hit per question (None = miss)."""
    n = len(first_ranks)
    present = [r for r in first_ranks if r is not None]

    def hit_rate(cutoff: int) -> float:
        return sum(1 for r in present if r <= cutoff) / n if n else 0.0

    rr_sum = sum(1.0 / r for r in present)
    # None when no question was answered
    avg_rank = sum(present) / len(present) if present else None
    return RetrievalMetrics(
        n=n,
        hit_at_1=hit_rate(1),
        hit_at_3=hit_rate(3),
        hit_at_5=hit_rate(5),
        mrr=rr_sum / n if n else 0.0,
        avg_first_rank=avg_rank,
    )
