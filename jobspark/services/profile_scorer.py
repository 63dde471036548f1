"""
Profile completeness scoring.

Each populated section adds a fixed weight; the total is capped at 100.
Presence is plain truthiness, so None, "", 0 and empty lists or dicts all
count as missing. Stored progress values depend on this, keep it as is.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

MAX_SCORE = 100


def _get(mapping: Any, key: str) -> Any:
    if isinstance(mapping, Mapping):
        return mapping.get(key)
    return None


def _job_preferences(profile: Mapping) -> Any:
    return _get(profile, "jobPreferences")


def _salary_complete(profile: Mapping) -> bool:
    salary = _get(_job_preferences(profile), "salary")
    return bool(_get(salary, "min")) and bool(_get(salary, "max"))


# (field, weight, check)
SCORING_RULES: List[Tuple[str, int, Callable[[Mapping], bool]]] = [
    ("headline", 10, lambda p: bool(p.get("headline"))),
    ("bio", 10, lambda p: bool(p.get("bio"))),
    ("location", 10, lambda p: bool(p.get("location"))),
    ("skills", 10, lambda p: bool(p.get("skills"))),
    ("experience", 10, lambda p: bool(p.get("experience"))),
    ("education", 10, lambda p: bool(p.get("education"))),
    ("jobPreferences.jobTypes", 10, lambda p: bool(_get(_job_preferences(p), "jobTypes"))),
    ("jobPreferences.locations", 10, lambda p: bool(_get(_job_preferences(p), "locations"))),
    ("jobPreferences.salary", 10, _salary_complete),
    ("careerInfo", 5, lambda p: bool(p.get("careerInfo"))),
    ("projects", 5, lambda p: bool(p.get("projects"))),
]


def score(profile: Optional[Dict[str, Any]]) -> int:
    """Return the completeness percentage (0-100) for a profile document."""
    if not isinstance(profile, Mapping):
        return 0
    total = sum(weight for _, weight, check in SCORING_RULES if check(profile))
    return min(total, MAX_SCORE)


def missing_fields(profile: Optional[Dict[str, Any]]) -> List[str]:
    """Names of the scoring rules the profile does not satisfy."""
    if not isinstance(profile, Mapping):
        return [field for field, _, _ in SCORING_RULES]
    return [field for field, _, check in SCORING_RULES if not check(profile)]
