"""Summary statistics over a screened batch, for the dashboard."""

import re
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from resume_screener.config import TOP_SKILLS_LIMIT, TOP_UNIVERSITIES_LIMIT
from resume_screener.cv_pipeline.field_rules import FRESH_GRADUATE
from resume_screener.schemas.candidate import ScoredCandidate

UNKNOWN_BUCKET = "Unknown"
EXPERIENCE_BUCKETS: List[str] = [FRESH_GRADUATE, "1-2 years", "3-5 years", "5+ years", UNKNOWN_BUCKET]


class BatchAnalytics(BaseModel):
    """Dashboard summary of one batch."""

    total_candidates: int = 0
    fresh_graduates: int = 0
    experienced: int = 0
    total_universities: int = 0
    top_universities: List[Tuple[str, int]] = Field(default_factory=list)
    top_skills: List[Tuple[str, int]] = Field(default_factory=list)
    experience_buckets: Dict[str, int] = Field(default_factory=dict)
    top_candidate: Optional[str] = None
    average_similarity: float = Field(default=0.0, description="Mean similarity, in percent")


def experience_bucket(experience: str) -> str:
    """Map 'Fresh Graduate' / '<N> years' / N/A onto a coarse bucket."""
    if experience == FRESH_GRADUATE:
        return FRESH_GRADUATE
    m = re.match(r"(\d+)", experience or "")
    if not m:
        return UNKNOWN_BUCKET
    years = int(m.group(1))
    if years == 0:
        return FRESH_GRADUATE
    if years <= 2:
        return "1-2 years"
    if years <= 5:
        return "3-5 years"
    return "5+ years"


def summarize(candidates: Sequence[ScoredCandidate]) -> BatchAnalytics:
    """Counts, top universities and skills, experience mix and average score."""
    if not candidates:
        return BatchAnalytics(experience_buckets={b: 0 for b in EXPERIENCE_BUCKETS})

    universities = Counter(c.university for c in candidates if c.has("university"))
    skills = Counter(s for c in candidates for s in c.skill_list())
    buckets = {b: 0 for b in EXPERIENCE_BUCKETS}
    for c in candidates:
        buckets[experience_bucket(c.experience)] += 1

    fresh = sum(1 for c in candidates if c.experience == FRESH_GRADUATE)
    top = max(candidates, key=lambda c: c.similarity)  # first wins on ties
    average = sum(c.similarity for c in candidates) / len(candidates) * 100

    return BatchAnalytics(
        total_candidates=len(candidates),
        fresh_graduates=fresh,
        experienced=len(candidates) - fresh,
        total_universities=len(universities),
        top_universities=universities.most_common(TOP_UNIVERSITIES_LIMIT),
        top_skills=skills.most_common(TOP_SKILLS_LIMIT),
        experience_buckets=buckets,
        top_candidate=top.name,
        average_similarity=round(average, 1),
    )
