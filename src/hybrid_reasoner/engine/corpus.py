"""Corpus model and loaders.

The corpus is a fixed, ordered tuple of documents handed to the engine once.
``load_corpus`` is a host-side helper; unlike the ranking path it raises on a
missing or malformed file so the caller can decide what to do.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENTS: Tuple[str, ...] = (
    "Machine learning is a subset of artificial intelligence that enables systems to learn from data",
    "Deep learning uses neural networks with multiple layers to process complex patterns",
    "Natural language processing helps computers understand and generate human language",
    "Computer vision enables machines to interpret and analyze visual information from images",
    "Reinforcement learning trains agents to make decisions through reward and punishment signals",
    "Data science combines statistics, programming, and domain knowledge to extract insights",
    "Neural networks are inspired by biological neurons and process information in layers",
    "Algorithm optimization improves computational efficiency and reduces execution time",
    "Cloud computing provides on-demand computing resources over the internet",
    "Distributed systems manage multiple machines working together to achieve a common goal",
    "Blockchain technology ensures security through decentralized and immutable records",
    "Quantum computing leverages quantum mechanics principles for exponentially faster processing",
)


@dataclass(frozen=True)
class Document:
    index: int
    text: str


def build_corpus(texts: Iterable[str]) -> Tuple[Document, ...]:
    """Wrap raw strings as documents, keeping their order as the corpus index."""
    return tuple(Document(index=i, text=str(t)) for i, t in enumerate(texts))


def load_corpus(path: str) -> List[str]:
    """Read documents from ``path``.

    A ``.json`` file must contain a list of strings (or of objects with a
    ``text`` field). Any other file is read as one document per non-blank line.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Corpus file not found: {path}")

    if path.lower().endswith(".json"):
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Corpus JSON must be a list, got {type(data).__name__}")
        texts: List[str] = []
        for item in data:
            if isinstance(item, str):
                texts.append(item)
            elif isinstance(item, dict) and isinstance(item.get("text"), str):
                texts.append(item["text"])
            else:
                raise ValueError(f"Unsupported corpus entry: {item!r}")
    else:
        with open(path, "r", encoding="utf-8") as f:
            texts = [line.strip() for line in f if line.strip()]

    logger.info(f"[corpus] Loaded {len(texts)} documents from {path}")
    return texts
