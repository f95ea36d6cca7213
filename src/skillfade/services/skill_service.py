"""Skill and activity persistence with decay applied on read."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from skillfade.config import DecayConfig
from skillfade.models.activity import Activity
from skillfade.models.skill import Skill
from skillfade.models.skill_snapshot import SkillSnapshot
from skillfade.schemas.activity import ActivityCreate, ActivityLogResult, ActivityRead
from skillfade.schemas.insights import AnalyticsSummary, RevisionPlan
from skillfade.schemas.skill import (
    DecayPointRead,
    SkillCategory,
    SkillCreate,
    SkillProjection,
    SkillRead,
    SkillUpdate,
)
from skillfade.services.analytics import compute_analytics
from skillfade.services.revision_planner import build_revision_plan
from skillfade.services.skill_decay import (
    apply_boost,
    calculate_activity_boost,
    calculate_decayed_score,
    generate_decay_curve,
    get_days_since,
    get_freshness_level,
    predict_days_until_decay,
)
from skillfade.utils.timeutils import to_naive_utc, utcnow

logger = logging.getLogger(__name__)


class SkillNotFoundError(Exception):
    """Raised when a skill ID does not exist."""


class SkillService:
    """
    Service for tracking skills and their practice history.

    Handles:
    - Skill CRUD, with decay applied whenever a skill is read for display
    - Logging activities: boost the decayed score and reset the checkpoint
    - Score snapshots, projections, revision plan and analytics

    Stored ``current_score`` is the score at ``last_practiced_at``; it is
    only rewritten when an activity is logged.
    """

    def __init__(self, db: Session, config: DecayConfig) -> None:
        """
        Initialize the skill service.

        Args:
            db: SQLAlchemy database session
            config: Revision and analytics thresholds
        """
        self.db = db
        self.config = config

    # ------------------------------------------------------------------ views

    @staticmethod
    def to_view(skill: Skill, now: datetime | None = None) -> SkillRead:
        """
        Render a stored skill with its decayed score.

        Args:
            skill: Skill ORM instance
            now: Reference time, defaults to the current time

        Returns:
            SkillRead with ``current_score`` decayed since the last practice
        """
        days = get_days_since(skill.last_practiced_at, now)
        score = calculate_decayed_score(skill.current_score, skill.decay_rate, days)
        return SkillRead(
            id=skill.id,
            name=skill.name,
            category=SkillCategory(skill.category),
            decay_rate=skill.decay_rate,
            initial_proficiency=skill.initial_proficiency,
            current_score=score,
            stored_score=skill.current_score,
            freshness=get_freshness_level(score),
            days_since_practice=days,
            last_practiced_at=skill.last_practiced_at,
            created_at=skill.created_at,
            updated_at=skill.updated_at,
        )

    # ------------------------------------------------------------------ skills

    def get_skill(self, skill_id: int) -> Skill:
        """
        Fetch a skill record.

        Raises:
            SkillNotFoundError: If no skill has this ID
        """
        skill = self.db.query(Skill).filter(Skill.id == skill_id).first()
        if skill is None:
            raise SkillNotFoundError(f"Skill {skill_id} not found")
        return skill

    def get_skill_view(self, skill_id: int, now: datetime | None = None) -> SkillRead:
        return self.to_view(self.get_skill(skill_id), now)

    def list_skills(self, now: datetime | None = None) -> list[SkillRead]:
        """All skills, newest first, with decay applied."""
        skills = self.db.query(Skill).order_by(Skill.created_at.desc(), Skill.id.desc()).all()
        return [self.to_view(skill, now) for skill in skills]

    def create_skill(self, data: SkillCreate, now: datetime | None = None) -> Skill:
        """
        Register a new skill at its initial proficiency.

        Without an explicit decay rate the skill gets
        ``config.default_decay_rate``.

        Args:
            data: Skill fields
            now: Practice checkpoint, defaults to the current time

        Returns:
            The persisted Skill
        """
        practiced_at = to_naive_utc(now) if now else utcnow()
        decay_rate = data.decay_rate
        if decay_rate is None:
            decay_rate = self.config.default_decay_rate
        skill = Skill(
            name=data.name,
            category=data.category.value,
            initial_proficiency=data.initial_proficiency,
            current_score=float(data.initial_proficiency),
            decay_rate=decay_rate,
            last_practiced_at=practiced_at,
        )
        self.db.add(skill)
        self.db.flush()

        self.db.add(
            SkillSnapshot(skill_id=skill.id, score=skill.current_score, snapshot_date=practiced_at)
        )
        self.db.commit()
        self.db.refresh(skill)

        logger.info("Created skill %s (%s) at %.1f", skill.id, skill.name, skill.current_score)
        return skill

    def update_skill(self, skill_id: int, data: SkillUpdate) -> Skill:
        """
        Apply a partial update to name, category or decay rate.

        Raises:
            SkillNotFoundError: If no skill has this ID
        """
        skill = self.get_skill(skill_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in changes.items():
            if isinstance(value, SkillCategory):
                value = value.value
            setattr(skill, field, value)
        self.db.commit()
        self.db.refresh(skill)
        return skill

    def delete_skill(self, skill_id: int) -> None:
        """
        Delete a skill along with its activities and snapshots.

        Raises:
            SkillNotFoundError: If no skill has this ID
        """
        skill = self.get_skill(skill_id)
        self.db.query(Activity).filter(Activity.skill_id == skill_id).delete()
        self.db.query(SkillSnapshot).filter(SkillSnapshot.skill_id == skill_id).delete()
        self.db.delete(skill)
        self.db.commit()
        logger.info("Deleted skill %s", skill_id)

    # -------------------------------------------------------------- activities

    def log_activity(self, data: ActivityCreate, now: datetime | None = None) -> ActivityLogResult:
        """
        Record a practice session and boost the skill.

        The boost is added to the decayed score, then the skill's checkpoint
        moves to ``now``.

        Args:
            data: Activity fields
            now: When the session happened, defaults to the current time

        Returns:
            ActivityLogResult with the scores before and after

        Raises:
            SkillNotFoundError: If the activity references an unknown skill
        """
        skill = self.get_skill(data.skill_id)
        practiced_at = to_naive_utc(now) if now else utcnow()

        previous_score = self.to_view(skill, practiced_at).current_score
        boost = calculate_activity_boost(data.duration_minutes, data.difficulty)
        new_score = apply_boost(previous_score, boost)

        activity = Activity(
            skill_id=skill.id,
            activity_type=data.activity_type.value,
            duration_minutes=data.duration_minutes,
            difficulty=data.difficulty,
            notes=data.notes,
            practiced_at=practiced_at,
        )
        self.db.add(activity)

        skill.current_score = new_score
        skill.last_practiced_at = practiced_at
        self.db.add(SkillSnapshot(skill_id=skill.id, score=new_score, snapshot_date=practiced_at))

        self.db.commit()
        self.db.refresh(activity)

        logger.info(
            "Logged %s activity on skill %s: %.1f -> %.1f (+%.1f)",
            activity.activity_type, skill.id, previous_score, new_score, boost,
        )
        return ActivityLogResult(
            activity=ActivityRead.model_validate(activity),
            previous_score=previous_score,
            boost=boost,
            new_score=new_score,
        )

    def list_activities(self, limit: int | None = None,
                        skill_id: int | None = None) -> list[Activity]:
        """Activities, most recently practiced first."""
        query = self.db.query(Activity)
        if skill_id is not None:
            query = query.filter(Activity.skill_id == skill_id)
        query = query.order_by(Activity.practiced_at.desc(), Activity.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def list_snapshots(self, skill_id: int) -> list[SkillSnapshot]:
        """
        Score history of a skill, oldest first.

        Raises:
            SkillNotFoundError: If no skill has this ID
        """
        self.get_skill(skill_id)
        return (
            self.db.query(SkillSnapshot)
            .filter(SkillSnapshot.skill_id == skill_id)
            .order_by(SkillSnapshot.snapshot_date.asc(), SkillSnapshot.id.asc())
            .all()
        )

    # ---------------------------------------------------------------- insights

    def project_skill(self, skill_id: int, days: int | None = None,
                      now: datetime | None = None) -> SkillProjection:
        """
        Project a skill's decay if it is not practiced again.

        Args:
            skill_id: Skill to project
            days: Horizon in days, defaults to ``config.projection_days``
            now: Reference time for the starting score

        Returns:
            SkillProjection starting from today's decayed score

        Raises:
            SkillNotFoundError: If no skill has this ID
        """
        horizon = self.config.projection_days if days is None else days
        view = self.get_skill_view(skill_id, now)
        curve = generate_decay_curve(view.current_score, view.decay_rate, horizon)
        return SkillProjection(
            skill_id=view.id,
            current_score=view.current_score,
            decay_rate=view.decay_rate,
            days=horizon,
            points=[DecayPointRead(day=p.day, score=p.score) for p in curve],
            days_until_review=predict_days_until_decay(
                view.current_score, self.config.review_threshold, view.decay_rate
            ),
            days_until_critical=predict_days_until_decay(
                view.current_score, self.config.critical_threshold, view.decay_rate
            ),
        )

    def revision_plan(self, now: datetime | None = None) -> RevisionPlan:
        return build_revision_plan(self.list_skills(now), self.config)

    def analytics(self, now: datetime | None = None) -> AnalyticsSummary:
        """Analytics across every skill and every logged activity."""
        reference = now or utcnow()
        activities = [ActivityRead.model_validate(a) for a in self.list_activities()]
        return compute_analytics(self.list_skills(reference), activities, reference, self.config)
