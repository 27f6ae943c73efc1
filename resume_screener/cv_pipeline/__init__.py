"""Screening pipeline: text extraction, field extraction, batch processing."""

from .batch_processor import process_batch, process_batch_async, screen_resumes
from .field_extractor import extract_profile
from .text_extractor import extract_text

__all__ = ["extract_text", "extract_profile", "process_batch", "process_batch_async", "screen_resumes"]
