"""Uploaded document schema (job description or resume)."""

from enum import Enum
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field


class DocumentFormat(str, Enum):
    """Formats the text extractor accepts."""

    PDF = "pdf"
    TXT = "txt"
    DOC = "doc"
    DOCX = "docx"


class Document(BaseModel):
    """An uploaded file as received. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Original filename")
    declared_format: str = Field(default="", description="Format declared by the upload, e.g. 'pdf'")
    content: bytes = Field(default=b"", description="Raw file bytes")

    @classmethod
    def from_upload(cls, filename: str, data: bytes) -> "Document":
        """Build a Document, taking the declared format from the filename extension."""
        suffix = PurePath(filename or "").suffix.lower().lstrip(".")
        return cls(name=filename or "", declared_format=suffix, content=data or b"")
