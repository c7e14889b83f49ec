"""PDF extraction through PyMuPDF on a generated two-page document."""
from __future__ import annotations

import fitz

from lexrag import ChunkIndex
from lexrag.clean_profiles import CleaningProfile
from lexrag.eval.datasets import load_pages_jsonl
from lexrag.extract_pages import extract_pdf_pages, extract_pdf_text, join_pages, write_jsonl


def _make_pdf(path) -> None:
    doc = fitz.open()
    for text in ("Cats are mammals.", "Birds lay eggs."):
        page = doc.new_page()
        page.insert_text((72, 72), text)
    doc.save(str(path))
    doc.close()


def test_extract_pdf_pages(tmp_path) -> None:
    pdf = tmp_path / "doc.pdf"
    _make_pdf(pdf)
    pages = extract_pdf_pages(pdf)
    assert [p["page"] for p in pages] == [1, 2]
    assert "Cats are mammals." in pages[0]["text"]
    assert "Birds lay eggs." in pages[1]["text"]


def test_extract_pdf_text_feeds_index(tmp_path) -> None:
    pdf = tmp_path / "doc.pdf"
    _make_pdf(pdf)
    text = extract_pdf_text(pdf, CleaningProfile())
    assert text == text.strip()

    index = ChunkIndex(chunk_size=20)
    index.add_document(text)
    assert index.retrieve_relevant_chunks("eggs", top_k=1) == ["Birds lay eggs."]


def test_join_pages_and_jsonl(tmp_path) -> None:
    pages = [{"page": 1, "text": "  One.  \n"}, {"page": 2, "text": "Two.\t\t"}]
    assert join_pages(pages) == "One.  \n\nTwo."
    assert join_pages(pages, CleaningProfile()) == "One.\nTwo."

    out = tmp_path / "nested" / "pages.jsonl"
    write_jsonl(pages, out)
    loaded = load_pages_jsonl(out)
    assert [(p.page, p.text) for p in loaded] == [(1, "  One.  \n"), (2, "Two.\t\t")]
