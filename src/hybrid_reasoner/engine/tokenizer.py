"""Tokenization policies shared by the semantic and keyword rankers.

Both policies normalize text the same way (lowercase, punctuation stripped,
whitespace split); they only differ in the minimum token length kept.
"""
from __future__ import annotations

import re
from typing import List

__all__ = [
    "SEMANTIC_MIN_LENGTH",
    "KEYWORD_MIN_LENGTH",
    "tokenize",
    "semantic_tokens",
    "keyword_tokens",
]

# Tokens of length <= 2 are noise for the bag-of-words model
SEMANTIC_MIN_LENGTH = 3
KEYWORD_MIN_LENGTH = 1

_NON_WORD_RE = re.compile(r"[^\w\s]")


def tokenize(text: str, min_length: int) -> List[str]:
    """Return the ordered tokens of ``text`` that are at least ``min_length`` long."""
    if not text:
        return []
    cleaned = _NON_WORD_RE.sub("", text.lower())
    return [tok for tok in cleaned.split() if len(tok) >= min_length]


def semantic_tokens(text: str) -> List[str]:
    return tokenize(text, SEMANTIC_MIN_LENGTH)


def keyword_tokens(text: str) -> List[str]:
    return tokenize(text, KEYWORD_MIN_LENGTH)
