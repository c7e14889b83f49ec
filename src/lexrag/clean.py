from __future__ import annotations

import re


# Break after a terminator, consuming the whitespace run that follows it.
_re_sentence_break = re.compile(r"(?<=[.!?])\s+")
_re_word = re.compile(r"\w+", flags=re.ASCII)
_re_whitespace = re.compile(r"\s+")


def split_sentences(text: str) -> list[str]:
    """Heuristic sentence split after '.', '!' or '?' followed by whitespace.

    Not a real sentence tokenizer: abbreviations ("e.g. this") and similar
    patterns are split too.
    """
    return _re_sentence_break.split(text)


def split_words(text: str) -> list[str]:
    """Whitespace-delimited words, as used by the over-long sentence fallback."""
    return _re_whitespace.split(text)


def word_tokenize(text: str) -> list[str]:
    """Lowercase ASCII alphanumeric runs; everything else is a separator.

    Accented letters split a token: "naïve" -> ["na", "ve"].
    """
    if not text:
        return []
    return _re_word.findall(text.lower())
