from __future__ import annotations

from lexrag import ChunkIndex
from lexrag.prompts import build_enhanced_prompt, build_prompts


def test_enhanced_prompt_with_chunks() -> None:
    out = build_enhanced_prompt("Make a podcast", ["First passage.", "Second passage."])
    assert out == "Based on the following document: First passage.\n\nSecond passage.\n\nPrompt: Make a podcast"


def test_enhanced_prompt_without_chunks_is_bare_prompt() -> None:
    assert build_enhanced_prompt("Make a podcast", []) == "Make a podcast"


def test_build_prompts_follows_stored_prompts() -> None:
    index = ChunkIndex(chunk_size=20, top_k=1)
    index.add_document("Cats are mammals. Birds lay eggs.")
    index.add_prompt("eggs")
    index.add_prompt("mammals")
    assert build_prompts(index) == [
        "Based on the following document: Birds lay eggs.\n\nPrompt: eggs",
        "Based on the following document: Cats are mammals.\n\nPrompt: mammals",
    ]


def test_build_prompts_keeps_repeated_prompts_separate() -> None:
    index = ChunkIndex(chunk_size=20, top_k=1)
    index.add_document("Cats are mammals. Birds lay eggs.")
    index.add_prompt("eggs")
    index.add_prompt("eggs")
    expected = "Based on the following document: Birds lay eggs.\n\nPrompt: eggs"
    assert build_prompts(index) == [expected, expected]


def test_build_prompts_without_document_returns_bare_prompts() -> None:
    index = ChunkIndex()
    index.add_prompt("Make a podcast")
    assert build_prompts(index) == ["Make a podcast"]
    assert build_prompts(ChunkIndex()) == []
