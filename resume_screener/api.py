"""
HTTP boundary for the screening engine (FastAPI).
POST /process_resumes/ with multipart fields jd_file and resume_files.
"""

from typing import List, Optional

from fastapi import FastAPI, File, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_screener import __version__
from resume_screener.config import CORS_ALLOW_ORIGINS
from resume_screener.cv_pipeline.batch_processor import process_batch_async
from resume_screener.errors import InvalidRequestError
from resume_screener.schemas.document import Document
from resume_screener.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Resume Screener",
    description="Rank uploaded resumes by lexical similarity to a job description.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["*"],
)


async def _to_document(upload: UploadFile) -> Document:
    data = await upload.read()
    return Document.from_upload(upload.filename or "", data)


@app.post("/process_resumes/")
async def process_resumes(
    jd_file: Optional[UploadFile] = File(default=None),
    resume_files: Optional[List[UploadFile]] = File(default=None),
) -> JSONResponse:
    """Screen every uploaded resume against the job description and return them ranked."""
    try:
        jd_document = await _to_document(jd_file) if jd_file is not None else None
        resumes = [await _to_document(f) for f in (resume_files or [])]
        logger.info("Screening request: jd=%s resumes=%s", jd_document and jd_document.name, len(resumes))
        batch = await process_batch_async(jd_document, resumes)
        return JSONResponse({"success": True, "results": batch.results()})
    except InvalidRequestError as e:
        logger.warning("Rejected screening request: %s", e)
        return JSONResponse({"error": str(e)}, status_code=400)
    except Exception:
        logger.exception("Error processing resumes")
        return JSONResponse({"error": "Failed to process files. Please try again."}, status_code=500)
