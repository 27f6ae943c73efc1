"""Lexical similarity between a job description and a resume."""

from typing import Set


def tokenize(text: str) -> Set[str]:
    """Distinct lowercase tokens, split on whitespace runs."""
    return set((text or "").lower().split())


def jaccard_similarity(text_a: str, text_b: str) -> float:
    """
    |A ∩ B| / |A ∪ B| over distinct lowercase whitespace tokens.
    No stemming, stopwords or weighting. Two empty texts score 0.0.
    """
    tokens_a = tokenize(text_a)
    tokens_b = tokenize(text_b)
    union = tokens_a | tokens_b
    if not union:
        return 0.0
    return len(tokens_a & tokens_b) / len(union)
