"""Fixed skill vocabularies scanned for in resume text. Order is significant."""

from typing import Tuple

# Technical skills: languages, frameworks, infra tools
TECH_SKILLS: Tuple[str, ...] = (
    "javascript", "python", "java", "react", "node.js", "typescript", "html", "css",
    "sql", "mongodb", "postgresql", "aws", "docker", "kubernetes", "git", "linux",
    "angular", "vue.js", "express", "django", "flask", "spring", "c++", "c#",
    "php", "ruby", "go", "rust", "swift", "kotlin", "tensorflow", "pytorch",
)

SOFT_SKILLS: Tuple[str, ...] = (
    "leadership", "communication", "teamwork", "problem solving", "analytical",
    "creative", "adaptable", "organized", "detail oriented", "time management",
    "critical thinking", "collaboration", "innovation", "mentoring", "project management",
)
