from __future__ import annotations

from typing import Sequence

import numpy as np
from rank_bm25 import BM25Okapi

from ..clean import word_tokenize
from .scoring import DEFAULT_WEIGHTS, ScoredChunk, ScoringWeights, rank_chunks


class BM25Index:
    """
    Lightweight BM25 baseline using rank-bm25.
    Tokenizes chunks the same way the lexical scorer does.
    """
    def __init__(self, chunks: Sequence[str]):
        self.chunks = list(chunks)
        tokenized = [word_tokenize(c) for c in self.chunks]
        # BM25Okapi cannot build an idf table from a corpus without tokens
        self._bm25 = BM25Okapi(tokenized) if any(tokenized) else None

    def get_scores(self, query: str) -> np.ndarray:
        if self._bm25 is None:
            return np.zeros(len(self.chunks), dtype=float)
        return np.array(self._bm25.get_scores(word_tokenize(query)), dtype=float)

    def topk(self, query: str, k: int) -> list[ScoredChunk]:
        scores = self.get_scores(query)
        if scores.size == 0 or k <= 0:
            return []
        order = np.argsort(-scores, kind="stable")[: min(k, len(scores))]
        return [ScoredChunk(idx=int(i), score=float(scores[i]), text=self.chunks[int(i)]) for i in order]


class LexicalIndex:
    """Multi-signal lexical scorer behind the same interface as BM25Index."""

    def __init__(self, chunks: Sequence[str], weights: ScoringWeights = DEFAULT_WEIGHTS):
        self.chunks = list(chunks)
        self.weights = weights

    def topk(self, query: str, k: int) -> list[ScoredChunk]:
        return rank_chunks(query, self.chunks, k, self.weights)


def build_retriever(name: str, chunks: Sequence[str], weights: ScoringWeights = DEFAULT_WEIGHTS):
    typ = str(name).lower()
    if typ in ("heuristic", "lexical"):
        return LexicalIndex(chunks, weights)
    if typ == "bm25":
        return BM25Index(chunks)
    raise ValueError(f"Unknown scorer: {name}")
