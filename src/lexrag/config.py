"""Index configuration loaded from plain dicts or YAML files.

Example YAML::

    chunk_size: 800
    top_k: 5
    weights:
      exact: 10
      partial: 1
    cleaning:
      dehyphenate: true
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .clean_profiles import CleaningProfile, profile_from_cfg
from .index.scoring import ScoringWeights, weights_from_cfg

_KNOWN_KEYS = {"chunk_size", "top_k", "weights", "cleaning"}


@dataclass(frozen=True)
class IndexConfig:
    chunk_size: int = 500
    top_k: int = 3
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    cleaning: CleaningProfile = field(default_factory=CleaningProfile)

    def __post_init__(self) -> None:
        validate_limits(self.chunk_size, self.top_k)

    def to_dict(self) -> dict:
        return {
            "chunk_size": self.chunk_size,
            "top_k": self.top_k,
            "weights": dict(self.weights.__dict__),
            "cleaning": dict(self.cleaning.__dict__),
        }


def validate_limits(chunk_size: int, top_k: int) -> None:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ValueError(f"chunk_size must be a positive integer, got {chunk_size!r}")
    if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k < 0:
        raise ValueError(f"top_k must be a non-negative integer, got {top_k!r}")


def config_from_cfg(cfg: dict | None) -> IndexConfig:
    cfg = cfg or {}
    unknown = set(cfg) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown index config key(s): {sorted(unknown)}")
    return IndexConfig(
        chunk_size=int(cfg.get("chunk_size", 500)),
        top_k=int(cfg.get("top_k", 3)),
        weights=weights_from_cfg(cfg.get("weights")),
        cleaning=profile_from_cfg(cfg.get("cleaning")),
    )


def load_config(path: str | Path | None) -> IndexConfig:
    """Read an IndexConfig from YAML; ``None`` gives the defaults."""
    if path is None:
        return IndexConfig()
    raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Index config must be a mapping, got {type(raw).__name__}")
    return config_from_cfg(raw)
