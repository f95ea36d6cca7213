"""Tests for the skill service."""

from datetime import datetime, timedelta, timezone

import pytest

from skillfade.config import DecayConfig
from skillfade.models.activity import Activity
from skillfade.models.skill import Skill
from skillfade.models.skill_snapshot import SkillSnapshot
from skillfade.schemas.activity import ActivityCreate, ActivityType
from skillfade.schemas.skill import SkillCategory, SkillCreate, SkillUpdate
from skillfade.services.skill_decay import calculate_decayed_score
from skillfade.services.skill_service import SkillNotFoundError, SkillService

NOW = datetime(2024, 6, 1, 12, 0, 0)


@pytest.fixture
def python_skill(service):
    """A 70-point Python skill last practiced at NOW."""
    return service.create_skill(
        SkillCreate(name="Python", category=SkillCategory.PROGRAMMING_LANGUAGE,
                    initial_proficiency=70, decay_rate=0.05),
        now=NOW,
    )


class TestCreateSkill:
    """Tests for SkillService.create_skill."""

    def test_starts_at_initial_proficiency(self, python_skill):
        """Stored score equals the initial proficiency."""
        assert python_skill.id is not None
        assert python_skill.current_score == 70
        assert python_skill.initial_proficiency == 70
        assert python_skill.last_practiced_at == NOW
        assert python_skill.category == "Programming Language"

    def test_records_initial_snapshot(self, service, python_skill):
        """Creation writes the first snapshot."""
        snapshots = service.list_snapshots(python_skill.id)
        assert len(snapshots) == 1
        assert snapshots[0].score == 70

    def test_strips_name(self, service):
        """Whitespace around names is removed."""
        skill = service.create_skill(SkillCreate(name="  Go  "), now=NOW)
        assert skill.name == "Go"

    def test_default_decay_rate_from_config(self, db):
        """Skills without a decay rate get the configured default."""
        service = SkillService(db, DecayConfig(default_decay_rate=0.09))
        skill = service.create_skill(SkillCreate(name="Go"), now=NOW)
        assert skill.decay_rate == 0.09

    def test_explicit_decay_rate_wins(self, db):
        """An explicit decay rate overrides the configured default."""
        service = SkillService(db, DecayConfig(default_decay_rate=0.09))
        skill = service.create_skill(SkillCreate(name="Go", decay_rate=0.02), now=NOW)
        assert skill.decay_rate == 0.02

    def test_aware_timestamp_stored_as_utc(self, service):
        """Aware checkpoints are normalized to naive UTC."""
        aware = datetime(2024, 6, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        skill = service.create_skill(SkillCreate(name="Rust"), now=aware)
        assert skill.last_practiced_at == NOW


class TestViews:
    """Tests for decay applied on read."""

    def test_no_decay_at_checkpoint(self, service, python_skill):
        """Reading at the checkpoint shows the stored score."""
        view = service.get_skill_view(python_skill.id, now=NOW)
        assert view.current_score == 70
        assert view.days_since_practice == 0
        assert view.freshness == "good"

    def test_decay_applied(self, service, python_skill):
        """Two weeks later the score has decayed."""
        view = service.get_skill_view(python_skill.id, now=NOW + timedelta(days=14))
        assert view.days_since_practice == 14
        assert view.current_score == pytest.approx(calculate_decayed_score(70, 0.05, 14))
        assert view.stored_score == 70
        assert view.freshness == "poor"

    def test_read_does_not_write_back(self, service, db, python_skill):
        """Displaying a decayed skill leaves the stored score alone."""
        service.list_skills(now=NOW + timedelta(days=30))
        db.expire_all()
        assert db.get(Skill, python_skill.id).current_score == 70

    def test_list_newest_first(self, service, python_skill):
        """Skills are listed most recently created first."""
        service.create_skill(SkillCreate(name="Go"), now=NOW)
        names = [s.name for s in service.list_skills(now=NOW)]
        assert names == ["Go", "Python"]

    def test_missing_skill(self, service):
        """Unknown IDs raise SkillNotFoundError."""
        with pytest.raises(SkillNotFoundError):
            service.get_skill(999)


class TestUpdateAndDelete:
    """Tests for update_skill and delete_skill."""

    def test_partial_update(self, service, python_skill):
        """Only provided fields change."""
        skill = service.update_skill(
            python_skill.id, SkillUpdate(decay_rate=0.1, category=SkillCategory.TOOLS)
        )
        assert skill.decay_rate == 0.1
        assert skill.category == "Tools"
        assert skill.name == "Python"
        assert skill.current_score == 70

    def test_update_missing(self, service):
        """Updating an unknown skill raises."""
        with pytest.raises(SkillNotFoundError):
            service.update_skill(999, SkillUpdate(name="X"))

    def test_delete_cascades(self, service, db, python_skill):
        """Deleting removes activities and snapshots too."""
        service.log_activity(ActivityCreate(skill_id=python_skill.id), now=NOW)
        service.delete_skill(python_skill.id)
        assert db.query(Skill).count() == 0
        assert db.query(Activity).count() == 0
        assert db.query(SkillSnapshot).count() == 0

    def test_delete_missing(self, service):
        """Deleting an unknown skill raises."""
        with pytest.raises(SkillNotFoundError):
            service.delete_skill(999)


class TestLogActivity:
    """Tests for SkillService.log_activity."""

    def test_boost_at_checkpoint(self, service, python_skill):
        """100 minutes at difficulty 3 adds 14 points."""
        result = service.log_activity(
            ActivityCreate(skill_id=python_skill.id, activity_type=ActivityType.CODING,
                           duration_minutes=100, difficulty=3, notes="kata"),
            now=NOW,
        )
        assert result.previous_score == 70
        assert result.boost == pytest.approx(14)
        assert result.new_score == pytest.approx(84)
        assert result.activity.activity_type == ActivityType.CODING
        assert result.activity.notes == "kata"

    def test_boost_applies_to_decayed_score(self, service, db, python_skill):
        """The boost is added to the score as decayed at practice time."""
        later = NOW + timedelta(days=10)
        result = service.log_activity(
            ActivityCreate(skill_id=python_skill.id, duration_minutes=50, difficulty=1),
            now=later,
        )
        decayed = calculate_decayed_score(70, 0.05, 10)
        assert result.previous_score == pytest.approx(decayed)
        assert result.new_score == pytest.approx(decayed + 5)

        db.expire_all()
        skill = db.get(Skill, python_skill.id)
        assert skill.current_score == pytest.approx(decayed + 5)
        assert skill.last_practiced_at == later

    def test_score_capped(self, service):
        """Scores never exceed 100."""
        skill = service.create_skill(SkillCreate(name="SQL", initial_proficiency=95), now=NOW)
        result = service.log_activity(
            ActivityCreate(skill_id=skill.id, duration_minutes=240, difficulty=5), now=NOW
        )
        assert result.new_score == 100

    def test_snapshot_recorded(self, service, python_skill):
        """Each activity appends a snapshot of the new score."""
        service.log_activity(
            ActivityCreate(skill_id=python_skill.id, duration_minutes=100, difficulty=3),
            now=NOW + timedelta(hours=1),
        )
        scores = [s.score for s in service.list_snapshots(python_skill.id)]
        assert len(scores) == 2
        assert scores[0] == 70
        assert scores[1] > 70

    def test_unknown_skill(self, service):
        """Activities for unknown skills are rejected."""
        with pytest.raises(SkillNotFoundError):
            service.log_activity(ActivityCreate(skill_id=42), now=NOW)

    def test_list_activities(self, service, python_skill):
        """Activities are newest first and can be filtered and limited."""
        other = service.create_skill(SkillCreate(name="Go"), now=NOW)
        for hours, skill_id in [(1, python_skill.id), (2, other.id), (3, python_skill.id)]:
            service.log_activity(
                ActivityCreate(skill_id=skill_id, duration_minutes=10 * hours),
                now=NOW + timedelta(hours=hours),
            )
        everything = service.list_activities()
        assert [a.duration_minutes for a in everything] == [30, 20, 10]
        assert len(service.list_activities(limit=2)) == 2
        assert [a.duration_minutes for a in service.list_activities(skill_id=python_skill.id)] == [30, 10]


class TestInsights:
    """Tests for projection, revision plan and analytics."""

    def test_projection(self, service, python_skill):
        """Projection starts from the current decayed score."""
        projection = service.project_skill(python_skill.id, days=5, now=NOW)
        assert projection.days == 5
        assert len(projection.points) == 6
        assert projection.points[0].score == 70
        assert projection.points[-1].score == pytest.approx(calculate_decayed_score(70, 0.05, 5))
        assert projection.days_until_review == 0
        assert projection.days_until_critical == 7

    def test_projection_default_horizon(self, service, config, python_skill):
        """Without a horizon the configured one is used."""
        projection = service.project_skill(python_skill.id, now=NOW)
        assert len(projection.points) == config.projection_days + 1

    def test_revision_plan(self, service, python_skill):
        """The plan reflects decayed scores."""
        plan = service.revision_plan(now=NOW + timedelta(days=20))
        assert plan.total_skills == 1
        assert plan.practice_today[0].name == "Python"

    def test_analytics(self, service, python_skill):
        """Analytics include logged practice."""
        service.log_activity(
            ActivityCreate(skill_id=python_skill.id, duration_minutes=45), now=NOW
        )
        summary = service.analytics(now=NOW + timedelta(days=1))
        assert summary.total_skills == 1
        assert summary.total_practice_minutes == 45
        assert summary.recent_activities == 1
