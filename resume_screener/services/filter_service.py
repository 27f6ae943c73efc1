"""Search and re-sort screening results. No UI logic; used by app layer."""

from typing import List

from resume_screener.schemas.candidate import RESULT_FIELDS, ScoredCandidate


def filter_results(
    candidates: List[ScoredCandidate],
    search_term: str,
) -> List[ScoredCandidate]:
    """
    Keep candidates where any displayed field contains search_term (case-insensitive).
    Does not mutate the input list. Empty search_term returns all candidates.
    """
    term = (search_term or "").strip().lower()
    if not term:
        return list(candidates)
    return [
        c for c in candidates
        if any(term in value.lower() for value in c.to_result().values())
    ]


def sort_results(
    candidates: List[ScoredCandidate],
    field: str = "similarity",
    descending: bool = True,
) -> List[ScoredCandidate]:
    """
    Sort by similarity (numeric) or any other result field (text).
    Stable; does not mutate the input list.
    """
    if field not in RESULT_FIELDS:
        raise ValueError(f"Unknown sort field: {field}")
    if field == "similarity":
        return sorted(candidates, key=lambda c: c.similarity, reverse=descending)
    return sorted(candidates, key=lambda c: getattr(c, field).lower(), reverse=descending)
