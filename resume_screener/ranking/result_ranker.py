"""Order scored candidates for display and export."""

from typing import Iterable, List

from resume_screener.schemas.candidate import ScoredCandidate


def rank_candidates(candidates: Iterable[ScoredCandidate]) -> List[ScoredCandidate]:
    """
    Sort by similarity, highest first. Does not mutate the input.
    Equal scores keep their submission order (sorted() is stable).
    """
    return sorted(candidates, key=lambda c: c.similarity, reverse=True)
