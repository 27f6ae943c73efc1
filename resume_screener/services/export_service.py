"""CSV export of ranked screening results."""

import csv
import io
from typing import Iterable, List

from resume_screener.schemas.candidate import ScoredCandidate

CSV_HEADERS: List[str] = [
    "Name", "Similarity", "University", "Email", "Skills", "Soft Skills", "Experience", "Location",
]


def export_csv(candidates: Iterable[ScoredCandidate]) -> bytes:
    """
    One header row then one row per candidate, every cell double-quoted,
    rows joined with newlines (no trailing newline). Returns UTF-8 bytes.
    """
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for c in candidates:
        writer.writerow([
            c.name,
            c.similarity_percent,
            c.university,
            c.email,
            c.skills,
            c.soft_skills,
            c.experience,
            c.location,
        ])
    return out.getvalue().rstrip("\n").encode("utf-8")
