"""Lexical chunk retrieval for prompt building.

Splits a document into sentence-bounded chunks and ranks them against a query
with a small set of lexical signals. No embeddings, no storage: an index lives
for one document/query exchange.
"""
from __future__ import annotations

from .chunkers.sentence import SentenceChunker, split_into_chunks
from .config import IndexConfig, load_config
from .index.chunk_index import NO_RESULTS_MESSAGE, ChunkIndex, RagChunk, create_rag_structure
from .index.scoring import ScoredChunk, ScoringWeights

__all__ = [
    "NO_RESULTS_MESSAGE",
    "ChunkIndex",
    "IndexConfig",
    "RagChunk",
    "ScoredChunk",
    "ScoringWeights",
    "SentenceChunker",
    "create_rag_structure",
    "load_config",
    "split_into_chunks",
]
