"""Schema exports."""

from .candidate import NOT_AVAILABLE, BatchResult, CandidateProfile, ResumeOutcome, ScoredCandidate
from .document import Document, DocumentFormat

__all__ = [
    "Document",
    "DocumentFormat",
    "CandidateProfile",
    "ScoredCandidate",
    "ResumeOutcome",
    "BatchResult",
    "NOT_AVAILABLE",
]
