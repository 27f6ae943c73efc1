"""Batch screening: one job description against many resumes, tolerant of per-resume failures."""

import asyncio
from typing import List, Optional, Sequence

from resume_screener.config import BATCH_CONCURRENCY
from resume_screener.cv_pipeline.field_extractor import extract_profile
from resume_screener.cv_pipeline.text_extractor import extract_text
from resume_screener.errors import (
    InternalProcessingError,
    InvalidRequestError,
    ScreeningError,
    UnsupportedFormatError,
)
from resume_screener.ranking.result_ranker import rank_candidates
from resume_screener.ranking.similarity import jaccard_similarity
from resume_screener.schemas.candidate import BatchResult, ResumeOutcome, ScoredCandidate
from resume_screener.schemas.document import Document
from resume_screener.utils.logger import get_logger

logger = get_logger(__name__)


def _validate_request(jd_document: Optional[Document], resumes: Sequence[Document]) -> None:
    if jd_document is None or not resumes:
        raise InvalidRequestError("Please upload both a job description and resumes.")


def _extract_job_description(jd_document: Document) -> str:
    """Extract JD text. Any failure here is fatal to the batch."""
    try:
        return extract_text(jd_document)
    except UnsupportedFormatError as e:
        raise InternalProcessingError(f"Job description could not be read: {e}") from e


def screen_one(jd_text: str, resume: Document) -> ResumeOutcome:
    """Extract, score and profile one resume. Failures become a skipped outcome."""
    try:
        resume_text = extract_text(resume)
        similarity = jaccard_similarity(jd_text, resume_text)
        profile = extract_profile(resume_text)
        candidate = ScoredCandidate.from_profile(profile, similarity, source_name=resume.name)
        return ResumeOutcome.success(candidate)
    except ScreeningError as e:
        logger.warning("Skipping resume %s: %s", resume.name, e)
        return ResumeOutcome.skipped(resume.name, str(e))
    except Exception as e:
        logger.exception("Unexpected error processing resume %s", resume.name)
        return ResumeOutcome.skipped(resume.name, f"Internal processing error: {e}")


def _collect(outcomes: List[ResumeOutcome]) -> BatchResult:
    candidates = [o.candidate for o in outcomes if o.ok]
    skipped = [o for o in outcomes if not o.ok]
    result = BatchResult(ranked=rank_candidates(candidates), skipped=skipped)
    logger.info(
        "Batch finished: resumes=%s ranked=%s skipped=%s",
        len(outcomes), len(result.ranked), len(skipped),
    )
    return result


def process_batch(jd_document: Optional[Document], resumes: Sequence[Document]) -> BatchResult:
    """
    Screen resumes against a job description, one after another.
    Raises InvalidRequestError when the JD is missing or there are no resumes,
    and InternalProcessingError when the JD itself cannot be extracted.
    """
    _validate_request(jd_document, resumes)
    jd_text = _extract_job_description(jd_document)
    outcomes = [screen_one(jd_text, r) for r in resumes]
    return _collect(outcomes)


async def process_batch_async(
    jd_document: Optional[Document],
    resumes: Sequence[Document],
    max_concurrent: int = BATCH_CONCURRENCY,
) -> BatchResult:
    """
    Same contract as process_batch, with resumes handled in a bounded worker pool.
    The JD is extracted before any resume work starts. Output order comes from
    the ranker, not from completion order.
    """
    _validate_request(jd_document, resumes)
    jd_text = await asyncio.to_thread(_extract_job_description, jd_document)
    sem = asyncio.Semaphore(max(1, max_concurrent))

    async def task(resume: Document) -> ResumeOutcome:
        async with sem:
            return await asyncio.to_thread(screen_one, jd_text, resume)

    outcomes = await asyncio.gather(*[task(r) for r in resumes])
    return _collect(list(outcomes))


def screen_resumes(jd_document: Optional[Document], resumes: Sequence[Document]) -> List[ScoredCandidate]:
    """Ranked candidates only; skipped resumes are logged and dropped."""
    return process_batch(jd_document, resumes).ranked
