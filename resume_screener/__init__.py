"""Resume screener: rank resumes against a job description by lexical overlap."""

__version__ = "1.0.0"
