"""Shared fixtures for the calibration tests."""

import pytest

from calibration.skill_profile import (
    AnswerRecord,
    RecentAnswer,
    SubtopicSkillProfile,
    UserSkillProfile,
)
from calibration.tiers import Tier
from calibration.topic_graph import TopicGraph

LINEAR = "Algebra: Linear Functions"
SLOPES = "Coordinate Geometry: Lines and Slopes"


class FakeRedis:
    """Just enough of redis.Redis for the profile store."""

    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
        return True

    def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
        return removed

    def exists(self, *keys):
        return sum(1 for k in keys if k in self.data)


def answer(topic_id, is_correct, seconds, tier=Tier.MEDIUM, timestamp=0.0):
    return AnswerRecord(
        topic_id=topic_id,
        is_correct=is_correct,
        time_to_answer=seconds,
        tier_at_answer_time=tier,
        timestamp=timestamp,
    )


def window(*pairs):
    """window((True, 20), (False, 40), ...) -> tuple of RecentAnswer"""
    return tuple(RecentAnswer(ok, float(t)) for ok, t in pairs)


def direct_topic(topic_id, attempts=3, correct=None, tier=Tier.MEDIUM, confidence=50, recent=()):
    return SubtopicSkillProfile(
        topic_id=topic_id,
        current_tier=tier,
        total_attempted=attempts,
        total_correct=attempts if correct is None else correct,
        confidence_score=confidence,
        recent=recent,
    )


@pytest.fixture
def graph():
    return TopicGraph()


@pytest.fixture
def fresh():
    return UserSkillProfile()


@pytest.fixture
def fake_redis():
    return FakeRedis()
