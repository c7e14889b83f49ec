from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Page:
    page: int
    text: str


class Chunker(Protocol):
    chunk_size: int

    def split(self, text: str) -> list[str]: ...
