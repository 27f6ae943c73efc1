"""Rule-based extraction of a structured candidate profile from resume text."""

from typing import Sequence

from resume_screener.config import MAX_LISTED_SKILLS
from resume_screener.cv_pipeline.field_rules import (
    EMAIL_RULES,
    EXPERIENCE_RULES,
    LOCATION_RULES,
    NAME_RULES,
    UNIVERSITY_RULES,
    FieldRule,
    first_match,
)
from resume_screener.cv_pipeline.vocabulary import SOFT_SKILLS, TECH_SKILLS
from resume_screener.schemas.candidate import NOT_AVAILABLE, CandidateProfile


def _cascade(rules: Sequence[FieldRule], text: str) -> str:
    value = first_match(rules, text)
    return value if value else NOT_AVAILABLE


def match_vocabulary(text: str, vocabulary: Sequence[str], limit: int = MAX_LISTED_SKILLS) -> str:
    """
    Terms from vocabulary contained in text (case-insensitive substring), in
    vocabulary order, at most `limit`, joined with ", ". N/A when none match.
    """
    lowered = (text or "").lower()
    found = [term for term in vocabulary if term.lower() in lowered]
    return ", ".join(found[:limit]) or NOT_AVAILABLE


def extract_profile(resume_text: str) -> CandidateProfile:
    """
    Pull name, email, university, experience, location and skills out of raw
    resume text. Never raises: unmatched fields stay N/A. Deterministic for a
    given input.
    """
    text = resume_text or ""
    return CandidateProfile(
        name=_cascade(NAME_RULES, text),
        email=_cascade(EMAIL_RULES, text),
        university=_cascade(UNIVERSITY_RULES, text),
        experience=_cascade(EXPERIENCE_RULES, text),
        location=_cascade(LOCATION_RULES, text),
        skills=match_vocabulary(text, TECH_SKILLS),
        soft_skills=match_vocabulary(text, SOFT_SKILLS),
    )
