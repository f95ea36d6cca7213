"""Portfolio analytics over skills and logged activities."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import datetime

from skillfade.config import DecayConfig
from skillfade.schemas.activity import ActivityRead
from skillfade.schemas.insights import AnalyticsSummary, CategoryShare, RankedSkill
from skillfade.schemas.skill import SkillRead
from skillfade.services.skill_decay import SECONDS_PER_DAY
from skillfade.utils.timeutils import as_utc


def format_practice_time(total_minutes: int) -> str:
    """
    Format a minute total as hours and minutes.

    Examples:
        >>> format_practice_time(135)
        '2h 15m'
        >>> format_practice_time(45)
        '0h 45m'
    """
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


def count_recent_activities(activities: Sequence[ActivityRead], now: datetime,
                            window_days: int) -> int:
    """Count activities practiced within the last ``window_days`` days."""
    reference = as_utc(now)
    count = 0
    for activity in activities:
        elapsed = (reference - as_utc(activity.practiced_at)).total_seconds()
        if elapsed / SECONDS_PER_DAY <= window_days:
            count += 1
    return count


def top_categories(skills: Sequence[SkillRead], limit: int) -> list[CategoryShare]:
    """Most common categories, largest first."""
    if not skills:
        return []
    counts = Counter(skill.category.value for skill in skills)
    return [
        CategoryShare(category=category, count=count, share=count / len(skills))
        for category, count in counts.most_common(limit)
    ]


def compute_analytics(skills: Sequence[SkillRead], activities: Sequence[ActivityRead],
                      now: datetime, config: DecayConfig) -> AnalyticsSummary:
    """
    Summarize skill health and practice volume.

    Args:
        skills: Skills with decayed scores
        activities: Logged activities to aggregate
        now: Reference time for the recent-activity window
        config: Strength thresholds and list limits

    Returns:
        AnalyticsSummary
    """
    scores = [s.current_score for s in skills]
    average_score = sum(scores) / len(scores) if scores else 0.0

    total_minutes = sum(a.duration_minutes for a in activities)
    average_minutes = total_minutes / len(activities) if activities else 0.0

    ranking = sorted(skills, key=lambda s: s.current_score, reverse=True)

    return AnalyticsSummary(
        total_skills=len(skills),
        average_score=average_score,
        strong_skills=sum(1 for score in scores if score >= config.strong_threshold),
        weak_skills=sum(1 for score in scores if score < config.critical_threshold),
        recent_activities=count_recent_activities(
            activities, now, config.recent_activity_days
        ),
        recent_window_days=config.recent_activity_days,
        total_activities=len(activities),
        total_practice_minutes=total_minutes,
        average_practice_minutes=average_minutes,
        total_practice_display=format_practice_time(total_minutes),
        top_categories=top_categories(skills, config.top_categories_limit),
        ranking=[
            RankedSkill(
                skill_id=s.id,
                name=s.name,
                category=s.category.value,
                score=s.current_score,
            )
            for s in ranking
        ],
    )
