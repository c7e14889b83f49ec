from __future__ import annotations

from typing import Sequence

from .index.chunk_index import ChunkIndex


def build_enhanced_prompt(prompt: str, chunks: Sequence[str]) -> str:
    """Prefix ``prompt`` with the retrieved passages.

    Without passages the prompt is returned unchanged, so a failed extraction
    still yields a usable generation request.
    """
    if not chunks:
        return prompt
    context = "\n\n".join(chunks)
    return f"Based on the following document: {context}\n\nPrompt: {prompt}"


def build_prompts(index: ChunkIndex) -> list[str]:
    """One enhanced prompt per stored prompt, in the order added.

    Repeated prompts stay separate, each with its own top chunks.
    """
    return [build_enhanced_prompt(prompt, index.retrieve_relevant_chunks(prompt)) for prompt in index.prompts]
