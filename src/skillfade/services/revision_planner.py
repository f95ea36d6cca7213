"""Revision plan: which skills to practice today, this week, or not yet."""

from __future__ import annotations

from collections.abc import Sequence

from skillfade.config import DecayConfig
from skillfade.schemas.insights import RevisionItem, RevisionPlan
from skillfade.schemas.skill import SkillRead
from skillfade.services.skill_decay import get_freshness_level, predict_days_until_decay


def _format_threshold(value: float) -> str:
    return f"{value:g}%"


def _critical_item(skill: SkillRead) -> RevisionItem:
    # Decay never reaches 0, so there is no day count to show
    days = predict_days_until_decay(skill.current_score, 0, skill.decay_rate)
    return RevisionItem(
        skill_id=skill.id,
        name=skill.name,
        score=skill.current_score,
        freshness=get_freshness_level(skill.current_score),
        target_score=0.0,
        days_until_target=days,
        message="Needs immediate attention",
    )


def _review_item(skill: SkillRead, target: float) -> RevisionItem:
    days = predict_days_until_decay(skill.current_score, target, skill.decay_rate)
    return RevisionItem(
        skill_id=skill.id,
        name=skill.name,
        score=skill.current_score,
        freshness=get_freshness_level(skill.current_score),
        target_score=target,
        days_until_target=days,
        message=f"Will drop to {_format_threshold(target)} in ~{days} days",
    )


def _healthy_item(skill: SkillRead) -> RevisionItem:
    return RevisionItem(
        skill_id=skill.id,
        name=skill.name,
        score=skill.current_score,
        freshness=get_freshness_level(skill.current_score),
    )


def build_revision_plan(skills: Sequence[SkillRead], config: DecayConfig) -> RevisionPlan:
    """
    Group skills by how urgently they need practice.

    Skills are expected to carry their decayed score in ``current_score``.

    Args:
        skills: Skills as displayed
        config: Thresholds and the number of healthy skills to show

    Returns:
        RevisionPlan with the weakest skills first in each urgent group
    """
    critical = sorted(
        (s for s in skills if s.current_score < config.critical_threshold),
        key=lambda s: s.current_score,
    )
    review = sorted(
        (
            s for s in skills
            if config.critical_threshold <= s.current_score < config.review_threshold
        ),
        key=lambda s: s.current_score,
    )
    healthy = [s for s in skills if s.current_score >= config.review_threshold]
    shown = healthy[: config.healthy_preview_limit]

    return RevisionPlan(
        practice_today=[_critical_item(s) for s in critical],
        practice_this_week=[_review_item(s, config.critical_threshold) for s in review],
        healthy=[_healthy_item(s) for s in shown],
        more_healthy=len(healthy) - len(shown),
        total_skills=len(skills),
    )
