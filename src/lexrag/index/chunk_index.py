"""In-memory chunk index: one active document, accumulated prompts.

Adding a document chunks it straight away and replaces the previous chunk set,
while the raw documents and the prompts keep accumulating across calls.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from ..chunkers.sentence import split_into_chunks
from ..config import IndexConfig, validate_limits
from .scoring import DEFAULT_WEIGHTS, ScoredChunk, ScoringWeights, rank_chunks, score_chunks

_log = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No relevant documents found."


@dataclass(frozen=True)
class RagChunk:
    prompt: str
    document: str

    def to_dict(self) -> dict[str, str]:
        return {"prompt": self.prompt, "document": self.document}


@dataclass
class ChunkIndex:
    chunk_size: int = 500
    top_k: int = 3
    weights: ScoringWeights = DEFAULT_WEIGHTS

    documents: list[str] = field(default_factory=list, init=False)
    prompts: list[str] = field(default_factory=list, init=False)
    chunks: list[str] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        validate_limits(self.chunk_size, self.top_k)

    @classmethod
    def from_config(cls, config: IndexConfig) -> "ChunkIndex":
        return cls(chunk_size=config.chunk_size, top_k=config.top_k, weights=config.weights)

    def add_document(self, document: str) -> None:
        self.documents.append(document)
        self.chunks = split_into_chunks(document, self.chunk_size)
        _log.debug(
            "Chunked document of %d chars into %d chunks (chunk_size=%d)",
            len(document),
            len(self.chunks),
            self.chunk_size,
        )

    def add_prompt(self, prompt: str) -> None:
        self.prompts.append(prompt)

    def score_chunks(self, query: str) -> list[ScoredChunk]:
        """Every chunk with its score, in chunk order."""
        scores = score_chunks(query, self.chunks, self.weights)
        return [ScoredChunk(idx=i, score=float(s), text=c) for i, (s, c) in enumerate(zip(scores, self.chunks))]

    def rank(self, query: str, top_k: int | None = None) -> list[ScoredChunk]:
        k = self.top_k if top_k is None else top_k
        return rank_chunks(query, self.chunks, k, self.weights)

    def retrieve_relevant_chunks(self, query: str, top_k: int | None = None) -> list[str]:
        return [r.text for r in self.rank(query, top_k)]

    def create_rag_structure(self) -> list[RagChunk]:
        rag: list[RagChunk] = []
        for prompt in self.prompts:
            for chunk in self.retrieve_relevant_chunks(prompt):
                rag.append(RagChunk(prompt=prompt, document=chunk))
        return rag

    def generate_response(self, query: str) -> str:
        relevant = self.retrieve_relevant_chunks(query)
        if not relevant:
            return NO_RESULTS_MESSAGE
        return f"Generated response based on: {json.dumps(relevant, ensure_ascii=False, separators=(',', ':'))}"


def create_rag_structure(text: str, prompt: str, chunk_size: int = 500) -> list[RagChunk]:
    """One-shot helper: index ``text`` and pair ``prompt`` with its top chunks."""
    index = ChunkIndex(chunk_size=chunk_size)
    index.add_document(text)
    index.add_prompt(prompt)
    return index.create_rag_structure()
