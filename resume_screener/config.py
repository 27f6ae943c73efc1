"""Configuration loaded from environment variables."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Logging
LOG_LEVEL: int = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO

# Concurrency
BATCH_CONCURRENCY: int = int(os.getenv("BATCH_CONCURRENCY", "5"))  # Max resumes processed at once

# HTTP API settings
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))
CORS_ALLOW_ORIGINS: list = [
    o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
]

# Document formats accepted by the text extractor
SUPPORTED_FORMATS: tuple = ("pdf", "txt", "doc", "docx")

# Field extraction
NOT_AVAILABLE_LABEL: str = "N/A"
MAX_LISTED_SKILLS: int = 5

# Dashboard / export
CSV_FILE_NAME: str = "resume_screening_results.csv"
TOP_UNIVERSITIES_LIMIT: int = 6
TOP_SKILLS_LIMIT: int = 8
