"""
Cross-Topic Inference - Propagate a conservative tier to related topics.

When a topic is confidently mastered (confidence >= 70 with 3+ direct
attempts), each related topic that has no direct evidence of its own
receives an inferred profile one notch more cautious than the source.
A topic that already holds an inferred tier moves at most one step
toward the new estimate.

Direct evidence always wins: a topic with its own answers and no
inferred tag is never touched.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from .skill_profile import Inferred, SubtopicSkillProfile, UserSkillProfile, clamp_confidence
from .thresholds import (
    INFER_FALLBACK,
    INFER_FROM_HARD,
    INFER_FROM_STRONG_MEDIUM,
    MASTERY_CONFIDENCE,
    MASTERY_MIN_ATTEMPTS,
    STRONG_MEDIUM_CONFIDENCE,
)
from .tiers import Tier
from .topic_graph import TopicGraph

logger = logging.getLogger(__name__)


def is_mastered(profile: Optional[SubtopicSkillProfile]) -> bool:
    """Enough confidence and evidence to propagate from."""
    return profile is not None and profile.is_mastered(MASTERY_CONFIDENCE, MASTERY_MIN_ATTEMPTS)


def inferred_estimate(source: SubtopicSkillProfile) -> Tuple[Tier, int]:
    """
    Tier and confidence a related topic inherits from `source`.

        Hard source                    -> Medium, min(60, conf - 20)
        Medium source with conf >= 75  -> Medium, min(55, conf - 25)
        anything else                  -> Easy,   min(50, conf - 30)
    """
    conf = source.confidence_score
    if source.current_tier == Tier.HARD:
        cap, offset = INFER_FROM_HARD
        tier = Tier.MEDIUM
    elif source.current_tier == Tier.MEDIUM and conf >= STRONG_MEDIUM_CONFIDENCE:
        cap, offset = INFER_FROM_STRONG_MEDIUM
        tier = Tier.MEDIUM
    else:
        cap, offset = INFER_FALLBACK
        tier = Tier.EASY

    return tier, clamp_confidence(min(cap, conf - offset))


def propagate_inference(user_profile: UserSkillProfile, source: SubtopicSkillProfile,
                        graph: TopicGraph) -> Tuple[UserSkillProfile, List[str]]:
    """
    Write inferred profiles for topics related to `source`.

    Returns the new user profile and the topic ids that were touched.
    """
    if not is_mastered(source):
        return user_profile, []

    tier, confidence = inferred_estimate(source)
    touched: List[SubtopicSkillProfile] = []

    for related_id in graph.related_topics(source.topic_id):
        existing = user_profile.get_topic(related_id)

        if existing is not None and existing.is_directly_assessed:
            continue

        if existing is None:
            base, new_tier = SubtopicSkillProfile(topic_id=related_id), tier
        else:
            # Stored tiers still move one step per answer
            base, new_tier = existing, existing.current_tier.step_toward(tier)

        touched.append(replace(
            base,
            current_tier=new_tier,
            confidence_score=confidence,
            provenance=Inferred(source.topic_id),
        ))

    if touched:
        logger.debug("Inferred %s/%d for %s from %s", tier.value, confidence,
                     [p.topic_id for p in touched], source.topic_id)

    return user_profile.with_topics(touched), [p.topic_id for p in touched]


def find_related_mastered_topic(user_profile: UserSkillProfile, topic_id: str,
                                graph: TopicGraph) -> Optional[SubtopicSkillProfile]:
    """First mastered topic whose relationships point at `topic_id`."""
    for source_id in graph.topics_relating_to(topic_id):
        candidate = user_profile.get_topic(source_id)
        if is_mastered(candidate):
            return candidate
    return None
