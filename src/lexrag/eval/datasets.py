from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from ..chunkers.base import Page


@dataclass
class RetrievalQuestion:
    id: str
    question: str
    expected_pages: list[int]


def load_jsonl(path: Path) -> list[dict]:
    items: list[dict] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            items.append(json.loads(line))
    return items


def load_pages_jsonl(path: Path) -> list[Page]:
    return [Page(page=int(obj["page"]), text=str(obj["text"])) for obj in load_jsonl(path)]


def load_retrieval_questions(path: Path) -> list[RetrievalQuestion]:
    raw = load_jsonl(path)
    out: list[RetrievalQuestion] = []
    for item in raw:
        out.append(
            RetrievalQuestion(
                id=str(item["id"]),
                question=str(item["question"]),
                expected_pages=[int(p) for p in item.get("expected_pages") or []],
            )
        )
    return out
