"""
Calibration module - Stealth skill calibration from ordinary answers.

Components:
    - skill_profile: Topic and user profile data model
    - confidence: Per-answer confidence scoring
    - rapid_pivot: Tier transitions from the last three answers
    - topic_graph: Topic relationship graph (networkx)
    - inference: Cross-topic tier inference
    - phase: Calibration phase state machine
    - engine: Answer ingestion pipeline and queries
"""

from .tiers import Tier, TierChange
from .skill_profile import (
    AnswerRecord,
    DiagnosticPhase,
    Direct,
    Inferred,
    SubtopicSkillProfile,
    UserSkillProfile,
    new_user_profile,
)
from .confidence import update_confidence
from .rapid_pivot import calculate_rapid_pivot, decide_tier_transition
from .topic_graph import TopicGraph
from .inference import propagate_inference
from .phase import complete_seed_mission, evaluate_calibration, is_placement_complete
from .engine import (
    AnswerResult,
    CalibrationEngine,
    get_recommended_difficulty,
    get_skill_summary,
    get_tier_counts,
    mission_difficulty,
    process_answer,
    select_seed_mission_topics,
    select_topics_for_practice,
)

__all__ = [
    "Tier",
    "TierChange",
    "AnswerRecord",
    "DiagnosticPhase",
    "Direct",
    "Inferred",
    "SubtopicSkillProfile",
    "UserSkillProfile",
    "new_user_profile",
    "update_confidence",
    "calculate_rapid_pivot",
    "decide_tier_transition",
    "TopicGraph",
    "propagate_inference",
    "complete_seed_mission",
    "evaluate_calibration",
    "is_placement_complete",
    "AnswerResult",
    "CalibrationEngine",
    "get_recommended_difficulty",
    "get_skill_summary",
    "get_tier_counts",
    "mission_difficulty",
    "process_answer",
    "select_seed_mission_topics",
    "select_topics_for_practice",
]
