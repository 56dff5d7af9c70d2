import math
from typing import Any, Dict

from resume_screener.core.errors import UnknownFieldError

# Public (camelCase) score field name -> Candidate attribute
SCORE_FIELDS: Dict[str, str] = {
    "jobFitScore": "job_fit_score",
    "semanticScore": "semantic_score",
    "skillMatchScore": "skill_match_score",
    "atsScore": "ats_score",
    "formattingScore": "formatting_score",
}

OPTIONAL_SCORE_FIELDS = {"ats_score", "formatting_score"}


def numeric(value: Any) -> float:
    """Missing or NaN scores count as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(value) else value


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; display values round .5 up
    return int(math.floor(value + 0.5))


def resolve_score_field(field: Any) -> str:
    """Map 'jobFitScore' / 'job_fit_score' / SortField-like enums to the attribute name."""
    name = getattr(field, "value", field)
    if name in SCORE_FIELDS:
        return SCORE_FIELDS[name]
    if name in SCORE_FIELDS.values():
        return name
    raise UnknownFieldError(name, SCORE_FIELDS.keys())
