"""
Calibration Engine - Answer ingestion pipeline and profile queries.

Features:
    - process_answer(): one answer event -> new profile + what changed
    - Recommended difficulty for any topic (direct, inferred or default)
    - Skill summary over the full topic catalog
    - Seed mission and practice topic selection
    - CalibrationEngine: load -> process -> save against a profile store

Every step takes values and returns new values; the caller's profile
is never mutated.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from .confidence import update_confidence
from .inference import find_related_mastered_topic, propagate_inference
from .phase import complete_seed_mission, evaluate_calibration
from .rapid_pivot import decide_tier_transition
from .skill_profile import (
    DIRECT,
    AnswerRecord,
    SubtopicSkillProfile,
    UserSkillProfile,
)
from .thresholds import (
    DIRECT_ATTEMPTS_TO_CLEAR_INFERENCE,
    PRACTICE_BASE_SCORE,
    PRACTICE_FEW_ATTEMPTS,
    PRACTICE_FEW_ATTEMPTS_BOOST,
    PRACTICE_INFERRED_BOOST,
    PRACTICE_JITTER,
    PRACTICE_LOW_ACCURACY_BOOST,
    SEED_MISSION_SIZE,
)
from .tiers import Tier, TierChange, average_tier
from .topic_graph import TopicGraph
from .topics import HIGH_IMPACT_TOPICS

logger = logging.getLogger(__name__)

_default_graph: Optional[TopicGraph] = None


def default_graph() -> TopicGraph:
    """Shared graph built from the bundled topic table."""
    global _default_graph
    if _default_graph is None:
        _default_graph = TopicGraph()
    return _default_graph


@dataclass(frozen=True)
class AnswerResult:
    """What one processed answer changed."""
    updated_profile: SubtopicSkillProfile
    user_profile: UserSkillProfile
    tier_change: TierChange
    new_tier: Optional[Tier] = None  # Only set when the tier moved
    inferred_topics: List[str] = field(default_factory=list)
    confidence_delta: int = 0


# ==================== Pipeline Steps ====================

def locate_topic(user_profile: UserSkillProfile, topic_id: str) -> SubtopicSkillProfile:
    """Existing profile, or a fresh Medium/50 one for an unseen topic."""
    return user_profile.get_topic(topic_id) or SubtopicSkillProfile(topic_id=topic_id)


def score_answer(profile: SubtopicSkillProfile, record: AnswerRecord) -> SubtopicSkillProfile:
    """Confidence update, scored against the topic's tier before any transition."""
    return replace(profile, confidence_score=update_confidence(
        profile.confidence_score, record.is_correct, record.time_to_answer, profile.current_tier
    ))


def settle_provenance(profile: SubtopicSkillProfile) -> SubtopicSkillProfile:
    """Direct evidence replaces an inferred tag after enough answers."""
    if profile.is_inferred and profile.total_attempted >= DIRECT_ATTEMPTS_TO_CLEAR_INFERENCE:
        return replace(profile, provenance=DIRECT)
    return profile


def process_answer(user_profile: UserSkillProfile, record: AnswerRecord,
                   graph: Optional[TopicGraph] = None) -> AnswerResult:
    """
    Run one answer through the full pipeline.

    Steps:
        1. locate or create the topic profile
        2. counters, streaks, average speed, answer window
        3. confidence score
        4-5. tier transition (auto-promote, safety net, rapid pivot)
        6. clear inferred tag after enough direct answers
        7. global question counter
        8. cross-topic inference from this topic
        9. calibration phase

    The caller persists `result.user_profile`.
    """
    graph = graph or default_graph()
    record = record.normalized()

    before = locate_topic(user_profile, record.topic_id)
    profile = before.with_answer(record)
    profile = score_answer(profile, record)

    decision = decide_tier_transition(profile)
    profile = settle_provenance(decision.profile)

    if decision.tier_change != TierChange.UNCHANGED:
        logger.info("Topic %r %s %s -> %s (%s)", record.topic_id, decision.tier_change.value,
                    before.current_tier.value, profile.current_tier.value, decision.rule)

    updated = user_profile.with_topic(profile)
    updated = replace(updated, total_questions_answered=updated.total_questions_answered + 1)

    updated, inferred = propagate_inference(updated, profile, graph)
    updated = evaluate_calibration(updated)

    return AnswerResult(
        updated_profile=profile,
        user_profile=updated,
        tier_change=decision.tier_change,
        new_tier=profile.current_tier if decision.tier_change != TierChange.UNCHANGED else None,
        inferred_topics=inferred,
        confidence_delta=profile.confidence_score - before.confidence_score,
    )


# ==================== Queries ====================

def get_recommended_difficulty(user_profile: UserSkillProfile, topic_id: str,
                               graph: Optional[TopicGraph] = None) -> Tier:
    """
    Tier to serve next for a topic.

    Known topic -> its current tier. Unknown topic with a mastered
    related topic -> Medium if that topic is Hard, else Easy.
    Otherwise Medium.
    """
    profile = user_profile.get_topic(topic_id)
    if profile is not None:
        return profile.current_tier

    mastered = find_related_mastered_topic(user_profile, topic_id, graph or default_graph())
    if mastered is not None:
        return Tier.MEDIUM if mastered.current_tier == Tier.HARD else Tier.EASY

    return Tier.MEDIUM


def get_skill_summary(user_profile: UserSkillProfile,
                      graph: Optional[TopicGraph] = None) -> Dict[str, Tier]:
    """Recommended tier for every topic in the catalog."""
    graph = graph or default_graph()
    return {tid: get_recommended_difficulty(user_profile, tid, graph) for tid in graph.topics}


def get_tier_counts(user_profile: UserSkillProfile,
                    graph: Optional[TopicGraph] = None) -> Dict[str, int]:
    """Count assessed (direct or inferred) catalog topics by tier."""
    graph = graph or default_graph()
    counts = {"assessed": 0, "easy": 0, "medium": 0, "hard": 0}

    for tid in graph.topics:
        profile = user_profile.get_topic(tid)
        if profile is None or not (profile.total_attempted > 0 or profile.is_inferred):
            continue
        counts["assessed"] += 1
        counts[profile.current_tier.value.lower()] += 1

    return counts


# ==================== Mission Helpers ====================

def select_seed_mission_topics(count: int = SEED_MISSION_SIZE,
                               rng: Optional[random.Random] = None) -> List[str]:
    """Random pick of high-impact topics for the welcome mission."""
    rng = rng or random.Random()
    count = max(0, min(count, len(HIGH_IMPACT_TOPICS)))
    return rng.sample(HIGH_IMPACT_TOPICS, count)


def practice_priority(profile: Optional[SubtopicSkillProfile]) -> float:
    """
    Higher means more in need of practice.

    Unassessed topics sit at a neutral 50; otherwise low confidence,
    few attempts, inferred estimates and low accuracy all raise it.
    """
    if profile is None:
        return PRACTICE_BASE_SCORE

    score = 100 - profile.confidence_score
    if profile.total_attempted < PRACTICE_FEW_ATTEMPTS:
        score += PRACTICE_FEW_ATTEMPTS_BOOST
    if profile.is_inferred:
        score += PRACTICE_INFERRED_BOOST
    if profile.total_attempted >= 3 and profile.accuracy_ratio < 0.5:
        score += PRACTICE_LOW_ACCURACY_BOOST
    return score


def select_topics_for_practice(user_profile: UserSkillProfile, count: int,
                               graph: Optional[TopicGraph] = None,
                               rng: Optional[random.Random] = None) -> List[str]:
    """Catalog topics ranked by practice priority, with a little jitter."""
    graph = graph or default_graph()
    rng = rng or random.Random()

    scored = []
    for tid in graph.topics:
        jitter = rng.uniform(-PRACTICE_JITTER, PRACTICE_JITTER)
        scored.append((practice_priority(user_profile.get_topic(tid)) + jitter, tid))

    scored.sort(key=lambda s: s[0], reverse=True)
    return [tid for _, tid in scored[:max(0, count)]]


def mission_difficulty(user_profile: UserSkillProfile, topic_ids: List[str],
                       graph: Optional[TopicGraph] = None) -> Tier:
    """Representative tier for a mission built from `topic_ids`."""
    graph = graph or default_graph()
    return average_tier(get_recommended_difficulty(user_profile, tid, graph) for tid in topic_ids)


# ==================== Store-backed Engine ====================

class CalibrationEngine:
    """
    Binds the pipeline to a topic graph and a profile store.

    The store needs `load(user_id)` and `save(user_id, profile)`. Each
    public method is one unit of work: load once, compute, save once.
    Calls for the same user must be serialized by the caller.
    """

    def __init__(self, store, graph: Optional[TopicGraph] = None):
        self.store = store
        self.graph = graph or default_graph()

    def record_answer(self, user_id: str, record: AnswerRecord) -> AnswerResult:
        """Process one answer and persist the result."""
        result = process_answer(self.store.load(user_id), record, self.graph)
        saved = self.store.save(user_id, result.user_profile)
        return replace(result, user_profile=saved)

    def complete_seed_mission(self, user_id: str) -> UserSkillProfile:
        profile = complete_seed_mission(self.store.load(user_id))
        return self.store.save(user_id, profile)

    def recommended_difficulty(self, user_id: str, topic_id: str) -> Tier:
        return get_recommended_difficulty(self.store.load(user_id), topic_id, self.graph)

    def skill_summary(self, user_id: str) -> Dict[str, Tier]:
        return get_skill_summary(self.store.load(user_id), self.graph)

    def diagnostic_phase(self, user_id: str) -> str:
        return self.store.load(user_id).diagnostic_phase.value
