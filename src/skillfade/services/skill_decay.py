"""Skill decay and scoring engine.

Proficiency fades exponentially when a skill is not practiced and is
boosted by logged activities. Every function here is pure: no I/O, no
state, and callers persist whatever they compute.

Formulas:
    decayed = score * e^(-rate * days)            clamped to [0, 100]
    boost   = min(minutes / 10, 10) * (1 + (difficulty - 1) * 0.2)
    days    = ln(target / current) / -rate        rounded, >= 0
"""

from __future__ import annotations

import math
from datetime import datetime
from enum import Enum
from typing import NamedTuple

from skillfade.utils.timeutils import as_utc

MIN_SCORE = 0.0
MAX_SCORE = 100.0

SECONDS_PER_DAY = 24 * 60 * 60

# Duration boost caps at 10 points, reached at 100 minutes
MAX_DURATION_BOOST = 10.0
MINUTES_PER_BOOST_POINT = 10.0
DIFFICULTY_STEP = 0.2


class FreshnessLevel(str, Enum):
    """Freshness tiers, best first."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    CRITICAL = "critical"

    @property
    def label(self) -> str:
        """Human-readable tier name."""
        return self.value.capitalize()


# Lower bound of each tier, checked in order
FRESHNESS_THRESHOLDS: tuple[tuple[float, FreshnessLevel], ...] = (
    (90.0, FreshnessLevel.EXCELLENT),
    (70.0, FreshnessLevel.GOOD),
    (50.0, FreshnessLevel.FAIR),
    (30.0, FreshnessLevel.POOR),
)


class DecayPoint(NamedTuple):
    """One point of a projected decay curve."""

    day: int
    score: float


def _clamp(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def calculate_decayed_score(base_score: float, decay_rate: float,
                            days_elapsed: float) -> float:
    """Score after ``days_elapsed`` days without practice.

    Returns exactly ``base_score`` for zero elapsed days and approaches 0
    as days grow. Negative rates or days are not checked.

    Examples:
        >>> calculate_decayed_score(100, 0.05, 0)
        100.0
        >>> round(calculate_decayed_score(100, 0.05, 14), 2)
        49.66
    """
    decayed = base_score * math.exp(-decay_rate * days_elapsed)
    return _clamp(decayed)


def get_days_since(timestamp: datetime, now: datetime | None = None) -> int:
    """Whole days between ``timestamp`` and now, rounded up.

    Any elapsed time under a day counts as 1; zero elapsed time counts as 0.
    Naive datetimes are treated as UTC.
    """
    if now is None:
        now = datetime.now().astimezone()
    diff = abs((as_utc(now) - as_utc(timestamp)).total_seconds())
    return math.ceil(diff / SECONDS_PER_DAY)


def get_freshness_level(score: float) -> FreshnessLevel:
    """Classify a score into its freshness tier.

    Examples:
        >>> get_freshness_level(90)
        <FreshnessLevel.EXCELLENT: 'excellent'>
        >>> get_freshness_level(89.99)
        <FreshnessLevel.GOOD: 'good'>
    """
    for lower_bound, level in FRESHNESS_THRESHOLDS:
        if score >= lower_bound:
            return level
    return FreshnessLevel.CRITICAL


def calculate_activity_boost(duration_minutes: float, difficulty: int) -> float:
    """Points gained from one practice session.

    Duration contributes up to 10 points; difficulty scales that by 1.0
    (difficulty 1) up to 1.8 (difficulty 5).

    Examples:
        >>> calculate_activity_boost(100, 3)
        14.0
        >>> calculate_activity_boost(10, 1)
        1.0
    """
    base_boost = min(duration_minutes / MINUTES_PER_BOOST_POINT, MAX_DURATION_BOOST)
    difficulty_multiplier = 1 + (difficulty - 1) * DIFFICULTY_STEP
    return base_boost * difficulty_multiplier


def apply_boost(current_score: float, boost: float) -> float:
    """New score after a boost, capped at 100."""
    return min(MAX_SCORE, current_score + boost)


def predict_days_until_decay(current_score: float, target_score: float,
                             decay_rate: float) -> int | None:
    """Days until ``current_score`` decays down to ``target_score``.

    Returns 0 when the score is already at or below the target. Exponential
    decay never reaches zero, so a target of 0 (or less) above which the
    score currently sits returns None instead of a day count.

    Examples:
        >>> predict_days_until_decay(100, 50, 0.05)
        14
        >>> predict_days_until_decay(40, 50, 0.05)
        0
        >>> predict_days_until_decay(40, 0, 0.05) is None
        True
    """
    if current_score <= target_score:
        return 0
    if target_score <= 0:
        return None
    days = math.log(target_score / current_score) / -decay_rate
    return max(0, round(days))


def generate_decay_curve(initial_score: float, decay_rate: float,
                         days: int) -> list[DecayPoint]:
    """Projected score for each day from 0 to ``days`` inclusive."""
    return [
        DecayPoint(day=day, score=calculate_decayed_score(initial_score, decay_rate, day))
        for day in range(days + 1)
    ]
