"""Ranking: lexical similarity and result ordering."""

from .result_ranker import rank_candidates
from .similarity import jaccard_similarity, tokenize

__all__ = ["jaccard_similarity", "tokenize", "rank_candidates"]
