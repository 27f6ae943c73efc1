"""Extract plain text from uploaded documents (PDF, TXT, DOC, DOCX). In-memory only.

No structural parsing is attempted: every format is decoded as text. PDF bytes
are additionally squeezed down to printable ASCII, so binary PDF structure
leaks through as noise that downstream scoring must tolerate.
"""

import re

from resume_screener.config import SUPPORTED_FORMATS
from resume_screener.errors import InternalProcessingError, UnsupportedFormatError
from resume_screener.schemas.document import Document, DocumentFormat
from resume_screener.utils.logger import get_logger

logger = get_logger(__name__)

_NON_PRINTABLE_ASCII = re.compile(r"[^\x20-\x7E]")
_WHITESPACE_RUN = re.compile(r"\s+")


def _decode(content: bytes) -> str:
    """Permissive UTF-8 decode: a leading BOM is dropped, invalid sequences become U+FFFD."""
    return content.decode("utf-8-sig", errors="replace")


def _clean_pdf_text(text: str) -> str:
    """Keep printable ASCII only, collapse whitespace runs, trim."""
    text = _NON_PRINTABLE_ASCII.sub(" ", text)
    return _WHITESPACE_RUN.sub(" ", text).strip()


def resolve_format(document: Document) -> DocumentFormat:
    """Return the document's format, or raise UnsupportedFormatError."""
    declared = (document.declared_format or "").lower().strip().lstrip(".")
    if declared not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(declared, document.name)
    return DocumentFormat(declared)


def extract_text(document: Document) -> str:
    """
    Convert a document into plain text.
    Raises UnsupportedFormatError for formats outside pdf/txt/doc/docx and
    InternalProcessingError if the bytes cannot be read at all.
    """
    fmt = resolve_format(document)
    try:
        text = _decode(document.content)
    except (TypeError, AttributeError) as e:
        raise InternalProcessingError(f"Could not decode {document.name or 'document'}: {e}") from e

    if fmt is DocumentFormat.PDF:
        text = _clean_pdf_text(text)
    logger.debug("Extracted %s chars from %s (%s)", len(text), document.name, fmt.value)
    return text
