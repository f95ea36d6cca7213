"""Services package."""

from skillfade.services.skill_decay import (
    DecayPoint,
    FreshnessLevel,
    apply_boost,
    calculate_activity_boost,
    calculate_decayed_score,
    generate_decay_curve,
    get_days_since,
    get_freshness_level,
    predict_days_until_decay,
)

__all__ = [
    "DecayPoint",
    "FreshnessLevel",
    "apply_boost",
    "calculate_activity_boost",
    "calculate_decayed_score",
    "generate_decay_curve",
    "get_days_since",
    "get_freshness_level",
    "predict_days_until_decay",
]
