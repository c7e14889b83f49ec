from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

import yaml

from ..chunkers.base import Chunker, Page
from ..chunkers.sentence import SentenceChunker
from ..clean_profiles import apply_cleaning
from ..config import IndexConfig, load_config
from ..index.retrievers import build_retriever
from .datasets import RetrievalQuestion, load_pages_jsonl, load_retrieval_questions
from .metrics import RetrievalMetrics, compute_metrics


def chunk_pages(pages: list[Page], config: IndexConfig) -> tuple[list[str], list[int]]:
    """Chunk each page on its own so every chunk keeps a single page number."""
    chunker: Chunker = SentenceChunker(chunk_size=config.chunk_size)
    texts: list[str] = []
    page_nums: list[int] = []
    for p in pages:
        for chunk in chunker.split(apply_cleaning(p.text, config.cleaning)):
            texts.append(chunk)
            page_nums.append(p.page)
    return texts, page_nums


def evaluate(
    pages: list[Page],
    questions: list[RetrievalQuestion],
    config: IndexConfig,
    scorer: str = "heuristic",
    k: int = 5,
) -> tuple[RetrievalMetrics, list[dict], int]:
    texts, page_nums = chunk_pages(pages, config)
    retriever = build_retriever(scorer, texts, config.weights)

    first_ranks: list[int | None] = []
    per_q: list[dict] = []

    for q in questions:
        results = retriever.topk(q.question, k)

        retrieved = []
        hit_rank = None
        for rank, r in enumerate(results, start=1):
            page = page_nums[r.idx]
            retrieved.append({"rank": rank, "score": r.score, "chunk_idx": r.idx, "page": page})
            if hit_rank is None and page in q.expected_pages:
                hit_rank = rank

        first_ranks.append(hit_rank)
        per_q.append({
            "id": q.id,
            "question": q.question,
            "expected_pages": q.expected_pages,
            "first_correct_rank": hit_rank,
            "top_k": retrieved,
        })

    return compute_metrics(first_ranks), per_q, len(texts)


def main() -> None:
    p = argparse.ArgumentParser(description="Evaluate lexical chunk retrieval against page-labelled questions")
    p.add_argument("--pages", required=True, help="JSONL with per-page extracted text")
    p.add_argument("--questions", required=True, help="JSONL retrieval questions")
    p.add_argument("--config", required=False, help="YAML index config (optional)")
    p.add_argument("--scorer", default="heuristic", help="heuristic | bm25 (default heuristic)")
    p.add_argument("--k", type=int, default=5, help="Top-k to retrieve (default 5)")
    p.add_argument(
        "--outdir",
        default="results/runs",
        help="Output directory for run artifacts (default results/runs)",
    )
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = p.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    config = load_config(args.config)
    pages = load_pages_jsonl(Path(args.pages))
    questions = load_retrieval_questions(Path(args.questions))

    metrics, per_q, num_chunks = evaluate(pages, questions, config, scorer=args.scorer, k=args.k)

    run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = Path(args.outdir) / f"lexrag_{args.scorer}_{run_id}"
    run_dir.mkdir(parents=True, exist_ok=True)

    (run_dir / "index_config.yaml").write_text(yaml.safe_dump(config.to_dict(), sort_keys=False), encoding="utf-8")
    (run_dir / "metrics.json").write_text(
        json.dumps(asdict(metrics), indent=2, ensure_ascii=False, allow_nan=False), encoding="utf-8"
    )
    (run_dir / "per_question.json").write_text(
        json.dumps(per_q, indent=2, ensure_ascii=False), encoding="utf-8"
    )

    print("=== Retrieval evaluation complete ===")
    print(f"Run directory: {run_dir}")
    print(f"Scorer: {args.scorer}  Chunks: {num_chunks}")
    print(f"Hit@1: {metrics.hit_at_1:.3f}  Hit@3: {metrics.hit_at_3:.3f}  Hit@5: {metrics.hit_at_5:.3f}")
    print(f"MRR: {metrics.mrr:.3f}  Avg first rank: {metrics.avg_first_rank}")


if __name__ == "__main__":
    main()
