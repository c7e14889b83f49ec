from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..clean import word_tokenize

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the lexical relevance signals.

    exact:    per distinct query token that is also a chunk token
    contains: per query token (duplicates included) found as a substring of
              the chunk, only for tokens longer than ``contains_min_len``
    partial:  per (query token, chunk token) pair where one contains the
              other, both longer than ``partial_min_len``
    base:     added to every chunk so zero-overlap chunks still rank
    """

    exact: float = 10.0
    contains: float = 5.0
    partial: float = 2.0
    base: float = 0.1
    contains_min_len: int = 3
    partial_min_len: int = 4


DEFAULT_WEIGHTS = ScoringWeights()


def weights_from_cfg(cfg: dict | None) -> ScoringWeights:
    cfg = cfg or {}
    unknown = set(cfg) - set(ScoringWeights.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown scoring weight(s): {sorted(unknown)}")
    return ScoringWeights(
        exact=float(cfg.get("exact", DEFAULT_WEIGHTS.exact)),
        contains=float(cfg.get("contains", DEFAULT_WEIGHTS.contains)),
        partial=float(cfg.get("partial", DEFAULT_WEIGHTS.partial)),
        base=float(cfg.get("base", DEFAULT_WEIGHTS.base)),
        contains_min_len=int(cfg.get("contains_min_len", DEFAULT_WEIGHTS.contains_min_len)),
        partial_min_len=int(cfg.get("partial_min_len", DEFAULT_WEIGHTS.partial_min_len)),
    )


@dataclass
class ScoredChunk:
    idx: int
    score: float
    text: str


def score_chunk(query_tokens: Sequence[str], chunk: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """Score one chunk against already tokenized (lowercase) query tokens."""
    chunk_lower = chunk.lower()
    chunk_tokens = word_tokenize(chunk_lower)
    chunk_token_set = set(chunk_tokens)

    exact = sum(weights.exact for tok in set(query_tokens) if tok in chunk_token_set)

    contains = sum(
        weights.contains
        for tok in query_tokens
        if len(tok) > weights.contains_min_len and tok in chunk_lower
    )

    # every long (query token, chunk token) pair counts, repeats included
    long_chunk_tokens = [t for t in chunk_tokens if len(t) > weights.partial_min_len]
    partial = 0.0
    for q in query_tokens:
        if len(q) <= weights.partial_min_len:
            continue
        for c in long_chunk_tokens:
            if q in c or c in q:
                partial += weights.partial

    return exact + contains + partial + weights.base


def score_chunks(query: str, chunks: Sequence[str], weights: ScoringWeights = DEFAULT_WEIGHTS) -> np.ndarray:
    query_tokens = word_tokenize(query)
    return np.array([score_chunk(query_tokens, c, weights) for c in chunks], dtype=float)


def rank_chunks(
    query: str,
    chunks: Sequence[str],
    k: int,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[ScoredChunk]:
    """Top-k chunks by descending score; equal scores keep chunk order."""
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    if not chunks or k == 0:
        return []
    scores = score_chunks(query, chunks, weights)
    # stable sort on the negated scores keeps ties in chunk order
    order = np.argsort(-scores, kind="stable")[:k]
    results = [ScoredChunk(idx=int(i), score=float(scores[i]), text=chunks[int(i)]) for i in order]
    _log.debug("Ranked %d chunks, top score %.1f", len(chunks), results[0].score)
    return results
