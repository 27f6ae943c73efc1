"""Ordered pattern rules per profile field. First rule that yields a value wins."""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

FRESH_GRADUATE: str = "Fresh Graduate"


@dataclass(frozen=True)
class FieldRule:
    """A compiled pattern plus a function turning its match into a field value."""

    label: str
    pattern: "re.Pattern[str]"
    value: Callable[["re.Match[str]"], str]

    def apply(self, text: str) -> Optional[str]:
        match = self.pattern.search(text)
        if not match:
            return None
        return self.value(match)


def first_match(rules: Sequence[FieldRule], text: str) -> Optional[str]:
    """Try rules in order; return the first value produced, or None."""
    for rule in rules:
        value = rule.apply(text)
        if value is not None:
            return value
    return None


def _group_or_whole(match: "re.Match[str]") -> str:
    captured = match.group(1) if match.re.groups else None
    return (captured or match.group(0)).strip()


def _group(match: "re.Match[str]") -> str:
    return match.group(1)


def _years(match: "re.Match[str]") -> str:
    return f"{match.group(1)} years"


def _fresh_graduate(match: "re.Match[str]") -> str:
    return FRESH_GRADUATE


def _rule(label: str, regex: str, value: Callable[["re.Match[str]"], str], flags: int = 0) -> FieldRule:
    return FieldRule(label=label, pattern=re.compile(regex, flags), value=value)


NAME_RULES: Tuple[FieldRule, ...] = (
    _rule("leading_two_capitalized_words", r"^([A-Z][a-z]+ [A-Z][a-z]+)", _group, re.MULTILINE),
    _rule("name_label", r"name[:\s]+([A-Z][a-z]+ [A-Z][a-z]+)", _group, re.IGNORECASE),
)

EMAIL_RULES: Tuple[FieldRule, ...] = (
    _rule("email", r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}", _group_or_whole),
)

UNIVERSITY_RULES: Tuple[FieldRule, ...] = (
    _rule("university_of", r"university of ([^,\n]+)", _group_or_whole, re.IGNORECASE),
    _rule("x_university", r"([^,\n]+ university)", _group_or_whole, re.IGNORECASE),
    _rule("x_college", r"([^,\n]+ college)", _group_or_whole, re.IGNORECASE),
    _rule("elite_school", r"\b(mit|stanford|harvard|berkeley|caltech)\b", _group_or_whole, re.IGNORECASE),
)

EXPERIENCE_RULES: Tuple[FieldRule, ...] = (
    _rule("years_of_experience", r"(\d+)\s*years?\s*(?:of\s*)?experience", _years, re.IGNORECASE),
    _rule("experience_label", r"experience[:\s]*(\d+)\s*years?", _years, re.IGNORECASE),
    _rule("fresh_graduate", r"(fresh graduate|entry level|new grad)", _fresh_graduate, re.IGNORECASE),
)

LOCATION_RULES: Tuple[FieldRule, ...] = (
    _rule("city_region", r"([A-Z][a-z]+,\s*[A-Z]{2})", _group),
    _rule("city_country", r"([A-Z][a-z]+,\s*[A-Z][a-z]+)", _group),
)
