from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .clean_profiles import apply_cleaning
from .config import load_config
from .extract_pages import extract_pdf_text
from .index.chunk_index import ChunkIndex
from .prompts import build_prompts


def load_document(args: argparse.Namespace, config) -> str:
    if args.pdf:
        return extract_pdf_text(Path(args.pdf), config.cleaning)
    return apply_cleaning(Path(args.text).read_text(encoding="utf-8"), config.cleaning)


def main() -> None:
    p = argparse.ArgumentParser(description="Rank document chunks against queries or prompts")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", help="Plain-text document")
    src.add_argument("--pdf", help="PDF document (text extracted with PyMuPDF)")
    p.add_argument("--query", action="append", default=[], help="Query to rank chunks for (repeatable)")
    p.add_argument("--prompt", action="append", default=[], help="Prompt to pair with its top chunks (repeatable)")
    p.add_argument("--config", help="YAML index config (optional)")
    p.add_argument("--k", type=int, default=None, help="Top-k override (default from config, 3)")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = p.parse_args()

    if not args.query and not args.prompt:
        p.error("at least one --query or --prompt is required")

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    config = load_config(args.config)
    top_k = config.top_k if args.k is None else args.k
    index = ChunkIndex(chunk_size=config.chunk_size, top_k=top_k, weights=config.weights)
    index.add_document(load_document(args, config))

    out: dict = {"num_chunks": len(index.chunks), "queries": [], "rag": [], "prompts": []}

    for q in args.query:
        hits = index.rank(q)
        out["queries"].append({
            "query": q,
            "top_k": [{"rank": rank, "idx": h.idx, "score": h.score, "text": h.text}
                      for rank, h in enumerate(hits, start=1)],
        })

    for prompt in args.prompt:
        index.add_prompt(prompt)
    if args.prompt:
        rag = index.create_rag_structure()
        out["rag"] = [rc.to_dict() for rc in rag]
        out["prompts"] = build_prompts(index)

    if args.json:
        print(json.dumps(out, indent=2, ensure_ascii=False))
        return

    print(f"Chunks: {out['num_chunks']}")
    for item in out["queries"]:
        print(f"\n=== {item['query']}")
        if not item["top_k"]:
            print(index.generate_response(item["query"]))
        for hit in item["top_k"]:
            print(f"[{hit['rank']}] score={hit['score']:.1f} chunk={hit['idx']}: {hit['text']}")
    for enhanced in out["prompts"]:
        print("\n=== prompt")
        print(enhanced)


if __name__ == "__main__":
    main()
