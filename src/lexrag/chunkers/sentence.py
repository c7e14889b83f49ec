from __future__ import annotations

from dataclasses import dataclass

from ..clean import split_sentences, split_words


def split_into_chunks(text: str, chunk_size: int = 500) -> list[str]:
    """Pack sentences into chunks shorter than ``chunk_size`` characters.

    Sentences are accumulated while the running length stays strictly below
    ``chunk_size``. A sentence that is itself ``>= chunk_size`` is broken up on
    whitespace; its trailing words stay open and keep accumulating with the
    next sentences. A single word longer than ``chunk_size`` is emitted as-is,
    so the bound is soft.
    """
    chunks: list[str] = []
    current = ""

    def emit(candidate: str) -> None:
        candidate = candidate.strip()
        if candidate:
            chunks.append(candidate)

    for sentence in split_sentences(text):
        if len(current) + len(sentence) < chunk_size:
            current = f"{current} {sentence}" if current else sentence
            continue

        if current:
            emit(current)
            current = ""

        if len(sentence) >= chunk_size:
            sentence_chunk = ""
            for word in split_words(sentence):
                if len(sentence_chunk) + len(word) + 1 < chunk_size:
                    sentence_chunk = f"{sentence_chunk} {word}" if sentence_chunk else word
                else:
                    emit(sentence_chunk)
                    sentence_chunk = word
            current = sentence_chunk
        else:
            current = sentence

    if current:
        emit(current)

    return chunks


@dataclass
class SentenceChunker:
    """Sentence-first chunker with a word-level fallback for long sentences."""

    chunk_size: int = 500

    def split(self, text: str) -> list[str]:
        return split_into_chunks(text, self.chunk_size)
