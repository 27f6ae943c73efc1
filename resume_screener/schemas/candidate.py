"""Candidate profile and scored result schemas."""

import math
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from resume_screener.config import NOT_AVAILABLE_LABEL

# Canonical "no value extracted" marker; valid field content, never None.
NOT_AVAILABLE: str = NOT_AVAILABLE_LABEL

# Wire / export field order
RESULT_FIELDS: List[str] = [
    "name",
    "similarity",
    "university",
    "email",
    "skills",
    "soft_skills",
    "experience",
    "location",
]


class CandidateProfile(BaseModel):
    """Structured attributes pulled from resume text by the field extractor."""

    name: str = Field(default=NOT_AVAILABLE, description="Candidate name")
    email: str = Field(default=NOT_AVAILABLE, description="Contact email")
    university: str = Field(default=NOT_AVAILABLE, description="University or college")
    skills: str = Field(default=NOT_AVAILABLE, description="Up to 5 technical skills, comma separated")
    soft_skills: str = Field(default=NOT_AVAILABLE, description="Up to 5 soft skills, comma separated")
    experience: str = Field(default=NOT_AVAILABLE, description="'Fresh Graduate' or '<N> years'")
    location: str = Field(default=NOT_AVAILABLE, description="City, region or city, country")

    def has(self, field: str) -> bool:
        """True if the field holds an extracted value rather than the N/A marker."""
        return getattr(self, field) != NOT_AVAILABLE

    def skill_list(self) -> List[str]:
        return [] if not self.has("skills") else self.skills.split(", ")

    def soft_skill_list(self) -> List[str]:
        return [] if not self.has("soft_skills") else self.soft_skills.split(", ")


class ScoredCandidate(CandidateProfile):
    """Candidate profile plus its similarity to the job description."""

    similarity: float = Field(..., ge=0.0, le=1.0, description="Jaccard similarity in [0, 1]")
    source_name: str = Field(default="", exclude=True, description="Uploaded filename")

    @property
    def similarity_percent(self) -> str:
        """Similarity as a whole percentage, rounded half up, e.g. '83%'."""
        return f"{int(math.floor(self.similarity * 100 + 0.5))}%"

    def to_result(self) -> Dict[str, str]:
        """Serialize to the result contract (similarity as a percentage string)."""
        data = self.model_dump()
        data["similarity"] = self.similarity_percent
        return {field: data[field] for field in RESULT_FIELDS}

    @classmethod
    def from_profile(cls, profile: CandidateProfile, similarity: float, source_name: str = "") -> "ScoredCandidate":
        return cls(**profile.model_dump(), similarity=similarity, source_name=source_name)


class ResumeOutcome(BaseModel):
    """Per-resume result: either a scored candidate or a skip with its reason."""

    source_name: str = Field(default="", description="Uploaded filename")
    candidate: Optional[ScoredCandidate] = Field(default=None, description="Set when processing succeeded")
    reason: Optional[str] = Field(default=None, description="Set when the resume was skipped")

    @property
    def ok(self) -> bool:
        return self.candidate is not None

    @classmethod
    def success(cls, candidate: ScoredCandidate) -> "ResumeOutcome":
        return cls(source_name=candidate.source_name, candidate=candidate)

    @classmethod
    def skipped(cls, source_name: str, reason: str) -> "ResumeOutcome":
        return cls(source_name=source_name, reason=reason)


class BatchResult(BaseModel):
    """Outcome of one screening request: ranked candidates plus skipped resumes."""

    ranked: List[ScoredCandidate] = Field(default_factory=list, description="Descending by similarity")
    skipped: List[ResumeOutcome] = Field(default_factory=list, description="Resumes that could not be processed")

    def results(self) -> List[Dict[str, str]]:
        return [c.to_result() for c in self.ranked]
