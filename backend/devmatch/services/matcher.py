"""
Developer Matching Service - Profile Compatibility Scoring

This module implements the weighted-attribute algorithm that scores how
compatible two developer profiles are and orders a swipe feed by it.

Match Score Composition (fixed weights):
    - Languages (40): shared programming languages
    - Activity (20): GitHub activity level alignment (low → high)
    - Interests (20): shared repository topics / interests
    - Location (20): same place, both remote, or same country

Score Range: 0-100 where higher = better match

Partial Credit:
    - Adjacent activity levels (e.g. medium/high): 50% of activity points
    - Same country but different city: 70% of location points

Complexity Analysis:
    - calculate_match_score: O(l + i) where l, i = language/interest counts
    - rank_profiles: O(n log n) for n candidates (stable sort)
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class ActivityLevel(str, Enum):
    """GitHub activity bands, declared in ascending order."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _ACTIVITY_ORDER.index(self)


_ACTIVITY_ORDER = list(ActivityLevel)


@dataclass(frozen=True)
class ScoreWeights:
    """Maximum points per sub-score. Defaults sum to 100."""

    languages: int = 40
    activity: int = 20
    interests: int = 20
    location: int = 20

    @property
    def total(self) -> int:
        return self.languages + self.activity + self.interests + self.location


DEFAULT_WEIGHTS = ScoreWeights()

ADJACENT_ACTIVITY_CREDIT = 0.5
SAME_COUNTRY_CREDIT = 0.7


@dataclass(frozen=True)
class Language:
    name: str
    percentage: float = 0


@dataclass(frozen=True)
class MatchProfile:
    """
    Read-only snapshot of the attributes used for scoring.

    Attributes:
        id: Owning user id (not used for scoring)
        languages: Languages the developer writes; unique by name
        activity_level: Activity band
        interests: Free-text interests (repo topics)
        location: Free-text location, e.g. "Berlin, Germany" or "Remote"
    """

    id: str
    languages: Tuple[Language, ...] = ()
    activity_level: ActivityLevel = ActivityLevel.MEDIUM
    interests: Tuple[str, ...] = ()
    location: Optional[str] = None

    def __post_init__(self):
        # Coerce plain strings so a bad level fails here, not mid-ranking
        object.__setattr__(self, "activity_level", ActivityLevel(self.activity_level))
        object.__setattr__(self, "languages", tuple(self.languages))
        object.__setattr__(self, "interests", tuple(self.interests))

    @property
    def language_names(self) -> frozenset:
        return frozenset(lang.name for lang in self.languages)


@dataclass(frozen=True)
class MatchBreakdown:
    languages: int
    activity: int
    interests: int
    location: int

    @property
    def total(self) -> int:
        return self.languages + self.activity + self.interests + self.location


class RankedProfile(NamedTuple):
    profile: MatchProfile
    match_score: int


def round_half_up(value: float) -> int:
    """Nearest int with halves rounded up (2.5 -> 3), unlike builtin round()."""
    return int(math.floor(value + 0.5))


def _overlap_points(a: Iterable[str], b: Iterable[str], points: int) -> int:
    """
    Points for the share of common items, relative to the smaller set.

    Empty sets use a denominator of 1, so they score 0 instead of failing.
    """
    set_a = set(a)
    set_b = set(b)
    common = len(set_a & set_b)
    denominator = max(1, min(len(set_a), len(set_b)))
    return min(points, round_half_up(points * common / denominator))


def extract_country(location: str) -> str:
    """
    Extract the country token from a "City, Country" style location.

    Uses the last comma-separated segment, or the whole string when there
    is no comma. This is a string heuristic, not a geocoder.
    """
    parts = location.split(",")
    if len(parts) > 1:
        return parts[-1].strip()
    return location.strip()


def compare_languages(
    viewer: MatchProfile,
    candidate: MatchProfile,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> int:
    """Language overlap score (0 to weights.languages). Percentages are ignored."""
    return _overlap_points(viewer.language_names, candidate.language_names, weights.languages)


def compare_activity(
    viewer: MatchProfile,
    candidate: MatchProfile,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> int:
    """Activity score: full for equal, half for adjacent, 0 for low vs high."""
    if viewer.activity_level == candidate.activity_level:
        return weights.activity

    difference = abs(viewer.activity_level.rank - candidate.activity_level.rank)
    if difference == 1:
        return round_half_up(weights.activity * ADJACENT_ACTIVITY_CREDIT)

    return 0


def compare_interests(
    viewer: MatchProfile,
    candidate: MatchProfile,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> int:
    """Interest overlap score (0 to weights.interests)."""
    return _overlap_points(viewer.interests, candidate.interests, weights.interests)


def compare_location(
    viewer: MatchProfile,
    candidate: MatchProfile,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> int:
    """
    Location score.

    Rules (first match wins):
        1. Either location missing/empty → 0
        2. Exact (case-sensitive) match → full points
        3. Both mention "remote" (any case) → full points
        4. Same trailing country token → 70% of points
        5. Otherwise → 0
    """
    loc_a = viewer.location
    loc_b = candidate.location
    if not loc_a or not loc_b:
        return 0

    if loc_a == loc_b:
        return weights.location

    if "remote" in loc_a.lower() and "remote" in loc_b.lower():
        return weights.location

    country_a = extract_country(loc_a)
    country_b = extract_country(loc_b)
    if country_a and country_b and country_a == country_b:
        return round_half_up(weights.location * SAME_COUNTRY_CREDIT)

    return 0


def calculate_match_breakdown(
    viewer: MatchProfile,
    candidate: MatchProfile,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> MatchBreakdown:
    return MatchBreakdown(
        languages=compare_languages(viewer, candidate, weights),
        activity=compare_activity(viewer, candidate, weights),
        interests=compare_interests(viewer, candidate, weights),
        location=compare_location(viewer, candidate, weights),
    )


def calculate_match_score(
    viewer: MatchProfile,
    candidate: MatchProfile,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> int:
    """
    Calculate the overall compatibility score between two profiles.

    Args:
        viewer: Profile of the user browsing the feed
        candidate: Profile being scored
        weights: Points per sub-score (fixed defaults in production)

    Returns:
        Integer score from 0 to weights.total (100 with default weights)

    Example:
        >>> viewer = MatchProfile(id="a", languages=(Language("Python"),),
        ...                       activity_level="high", interests=("AI",),
        ...                       location="NYC, USA")
        >>> calculate_match_score(viewer, viewer)
        100
    """
    return calculate_match_breakdown(viewer, candidate, weights).total


def rank_profiles(
    viewer: MatchProfile,
    candidates: Sequence[MatchProfile],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> List[RankedProfile]:
    """
    Score every candidate against the viewer and sort by score, highest first.

    The sort is stable: candidates with equal scores keep their input order.
    Inputs are never modified; each result pairs the candidate with its score.
    """
    scored = [
        RankedProfile(profile=candidate, match_score=calculate_match_score(viewer, candidate, weights))
        for candidate in candidates
    ]
    ranked = sorted(scored, key=lambda item: item.match_score, reverse=True)

    if ranked:
        logger.debug(
            "Ranked %d candidates for %s (top score %d)",
            len(ranked), viewer.id, ranked[0].match_score,
        )

    return ranked
