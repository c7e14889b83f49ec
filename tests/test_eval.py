"""Evaluation harness: metrics, datasets and per-page attribution."""
from __future__ import annotations

import json
from dataclasses import asdict

import pytest

from lexrag.chunkers.base import Page
from lexrag.config import IndexConfig
from lexrag.eval.datasets import RetrievalQuestion, load_retrieval_questions
from lexrag.eval.metrics import compute_metrics
from lexrag.eval.run_retrieval_eval import chunk_pages, evaluate
from lexrag.index.retrievers import BM25Index, build_retriever

PAGES = [
    Page(page=1, text="Cats are mammals. They purr."),
    Page(page=2, text="Birds lay eggs. They fly south."),
    Page(page=3, text="Fish swim in water."),
]


def test_compute_metrics() -> None:
    m = compute_metrics([1, 3, None, 2])
    assert m.n == 4
    assert m.hit_at_1 == pytest.approx(0.25)
    assert m.hit_at_3 == pytest.approx(0.75)
    assert m.hit_at_5 == pytest.approx(0.75)
    assert m.mrr == pytest.approx((1 + 1 / 3 + 1 / 2) / 4)
    assert m.avg_first_rank == pytest.approx(2.0)


def test_compute_metrics_empty() -> None:
    m = compute_metrics([])
    assert m.n == 0
    assert m.mrr == 0.0
    assert m.avg_first_rank is None


def test_metrics_with_no_hits_serialize_as_strict_json() -> None:
    m = compute_metrics([None, None])
    assert m.hit_at_1 == 0.0
    assert m.avg_first_rank is None
    assert json.loads(json.dumps(asdict(m), allow_nan=False))["avg_first_rank"] is None


def test_load_retrieval_questions(tmp_path) -> None:
    path = tmp_path / "q.jsonl"
    rows = [
        {"id": 1, "question": "Who lays eggs?", "expected_pages": [2]},
        {"id": "q2", "question": "What swims?"},
    ]
    path.write_text("\n".join(json.dumps(r) for r in rows) + "\n\n", encoding="utf-8")
    questions = load_retrieval_questions(path)
    assert questions == [
        RetrievalQuestion(id="1", question="Who lays eggs?", expected_pages=[2]),
        RetrievalQuestion(id="q2", question="What swims?", expected_pages=[]),
    ]


def test_chunk_pages_keeps_page_numbers() -> None:
    texts, page_nums = chunk_pages(PAGES, IndexConfig(chunk_size=20))
    assert texts == ["Cats are mammals.", "They purr.", "Birds lay eggs.", "They fly south.", "Fish swim in water."]
    assert page_nums == [1, 1, 2, 2, 3]


@pytest.mark.parametrize("scorer", ["heuristic", "bm25"])
def test_evaluate_finds_expected_pages(scorer) -> None:
    questions = [
        RetrievalQuestion(id="1", question="Which birds lay eggs?", expected_pages=[2]),
        RetrievalQuestion(id="2", question="Do fish swim?", expected_pages=[3]),
    ]
    metrics, per_q, num_chunks = evaluate(PAGES, questions, IndexConfig(), scorer=scorer, k=3)
    assert num_chunks == 3
    assert metrics.hit_at_1 == pytest.approx(1.0)
    assert [q["first_correct_rank"] for q in per_q] == [1, 1]
    assert per_q[0]["top_k"][0]["page"] == 2


def test_bm25_index_edge_cases() -> None:
    assert BM25Index([]).topk("anything", 3) == []
    index = BM25Index([p.text for p in PAGES])
    assert index.topk("eggs", 0) == []
    assert index.topk("eggs", 1)[0].idx == 1
    with pytest.raises(ValueError, match="Unknown scorer"):
        build_retriever("dense", ["x"])


def test_bm25_handles_chunks_without_word_characters() -> None:
    index = BM25Index(["!!!", "???"])
    assert [r.idx for r in index.topk("anything", 2)] == [0, 1]
    assert [r.score for r in index.topk("anything", 2)] == [0.0, 0.0]

    questions = [RetrievalQuestion(id="1", question="What is on the figure page?", expected_pages=[1])]
    metrics, per_q, num_chunks = evaluate([Page(1, "!!! ??? ...")], questions, IndexConfig(), scorer="bm25")
    assert num_chunks == 1
    assert per_q[0]["first_correct_rank"] == 1
    assert metrics.hit_at_1 == pytest.approx(1.0)
