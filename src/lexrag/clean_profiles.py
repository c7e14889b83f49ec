from __future__ import annotations

import re
from dataclasses import dataclass


_WS_RE = re.compile(r"[ \t]+")
_NONPRINT_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")
_HYPHEN_BREAK_RE = re.compile(r"(\w)-\n(\w)")  # dehyphenate across line breaks


@dataclass(frozen=True)
class CleaningProfile:
    name: str = "basic"

    strip_nonprinting: bool = True
    collapse_whitespace: bool = True
    dehyphenate: bool = False


def profile_from_cfg(cfg: dict | None) -> CleaningProfile:
    # allow empty cfg
    cfg = cfg or {}
    unknown = set(cfg) - set(CleaningProfile.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown cleaning option(s): {sorted(unknown)}")
    return CleaningProfile(
        name=str(cfg.get("name", "basic")),
        strip_nonprinting=bool(cfg.get("strip_nonprinting", True)),
        collapse_whitespace=bool(cfg.get("collapse_whitespace", True)),
        dehyphenate=bool(cfg.get("dehyphenate", False)),
    )


def apply_cleaning(text: str, prof: CleaningProfile) -> str:
    """Page-level cleaning. Run on extracted text before it is indexed."""
    if not text:
        return ""

    t = text

    if prof.strip_nonprinting:
        t = _NONPRINT_RE.sub("", t)

    # dehyphenate line-break hyphens (reno-\nvascular -> renovascular)
    if prof.dehyphenate:
        t = _HYPHEN_BREAK_RE.sub(r"\1\2", t)

    # normalize newlines first
    t = t.replace("\r\n", "\n").replace("\r", "\n")

    if prof.collapse_whitespace:
        # collapse runs of spaces/tabs
        t = _WS_RE.sub(" ", t)
        # collapse excessive blank lines
        t = re.sub(r"\n{3,}", "\n\n", t)
        t = t.strip()

    return t
