from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import fitz  # PyMuPDF

from .clean_profiles import CleaningProfile, apply_cleaning

_log = logging.getLogger(__name__)


def extract_pdf_pages(pdf_path: Path) -> list[dict]:
    """Extract text per page using PyMuPDF.

    Returns a list of dicts: {"page": int, "text": str}
    """
    doc = fitz.open(pdf_path)
    pages: list[dict] = []
    try:
        for i in range(doc.page_count):
            page = doc.load_page(i)
            pages.append({"page": i + 1, "text": page.get_text("text")})
    finally:
        doc.close()
    _log.info("Extracted %d pages from %s", len(pages), pdf_path)
    return pages


def join_pages(pages: list[dict], profile: CleaningProfile | None = None) -> str:
    """Concatenate page texts into one trimmed document string."""
    texts = [str(p["text"]) for p in pages]
    if profile is not None:
        texts = [apply_cleaning(t, profile) for t in texts]
    return "\n".join(texts).strip()


def extract_pdf_text(pdf_path: Path, profile: CleaningProfile | None = None) -> str:
    """Full document text, ready for ``ChunkIndex.add_document``."""
    return join_pages(extract_pdf_pages(pdf_path), profile)


def write_jsonl(items: list[dict], out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        for item in items:
            f.write(json.dumps(item, ensure_ascii=False) + "\n")


def main() -> None:
    parser = argparse.ArgumentParser(description="Extract PDF pages -> JSONL")
    parser.add_argument("--pdf", required=True, help="Path to the source PDF")
    parser.add_argument(
        "--out",
        required=True,
        help="Output JSONL path (e.g., data/processed/pages.jsonl)",
    )
    args = parser.parse_args()

    pdf_path = Path(args.pdf)
    out_path = Path(args.out)
    pages = extract_pdf_pages(pdf_path)
    write_jsonl(pages, out_path)
    print(f"Wrote {len(pages)} pages to {out_path}")


if __name__ == "__main__":
    main()
