"""Tests for profile_store.py"""

import pytest

from calibration.engine import process_answer
from calibration.skill_profile import DiagnosticPhase, UserSkillProfile
from calibration.tiers import Tier
from profile_store import InMemoryProfileStore, ProfileStore, RedisProfileStore

from conftest import LINEAR, SLOPES, answer


@pytest.fixture
def redis_store(fake_redis):
    return RedisProfileStore(client=fake_redis, key_prefix="test_profile")


@pytest.fixture(params=["redis", "memory"])
def store(request, fake_redis):
    if request.param == "redis":
        return RedisProfileStore(client=fake_redis, key_prefix="test_profile")
    return InMemoryProfileStore()


def test_missing_user_loads_fresh_profile(store):
    profile = store.load("nobody")
    assert profile.topics == {}
    assert profile.diagnostic_phase == DiagnosticPhase.SEED_MISSION
    assert profile.total_questions_answered == 0
    assert not profile.seed_mission_completed


def test_save_and_load_round_trip(store, graph):
    profile = UserSkillProfile()
    for t in (20, 22, 18):
        profile = process_answer(profile, answer(LINEAR, True, t), graph).user_profile

    saved = store.save("learner-1", profile)
    loaded = store.load("learner-1")

    assert saved.last_updated >= profile.last_updated
    assert loaded == saved
    assert loaded.topics[LINEAR].current_tier == Tier.HARD
    assert loaded.topics[SLOPES].inferred_from == LINEAR


def test_reset_discards_profile(store):
    store.save("learner-2", UserSkillProfile(total_questions_answered=7))
    assert store.exists("learner-2")

    store.reset("learner-2")
    assert not store.exists("learner-2")
    assert store.load("learner-2").total_questions_answered == 0


def test_last_writer_wins(store):
    store.save("learner-3", UserSkillProfile(total_questions_answered=1))
    store.save("learner-3", UserSkillProfile(total_questions_answered=2))
    assert store.load("learner-3").total_questions_answered == 2


def test_redis_key_layout(redis_store, fake_redis):
    redis_store.save("abc", UserSkillProfile())
    assert list(fake_redis.data) == ["test_profile:abc"]


def test_corrupt_snapshot_loads_fresh(redis_store, fake_redis):
    fake_redis.data["test_profile:broken"] = "{not json"
    assert redis_store.load("broken").topics == {}

    fake_redis.data["test_profile:bad-tier"] = (
        '{"topics": {"x": {"topic_id": "x", "current_tier": "Impossible"}}}'
    )
    assert redis_store.load("bad-tier").topics == {}


def test_bytes_payload_is_decoded(redis_store, fake_redis):
    redis_store.save("bytes", UserSkillProfile(total_questions_answered=4))
    fake_redis.data["test_profile:bytes"] = fake_redis.data["test_profile:bytes"].encode("utf-8")
    assert redis_store.load("bytes").total_questions_answered == 4


def test_key_prefix_from_environment(monkeypatch, fake_redis):
    monkeypatch.setenv("SKILL_PROFILE_KEY_PREFIX", "env_prefix")
    store = RedisProfileStore(client=fake_redis)
    store.save("u", UserSkillProfile())
    assert "env_prefix:u" in fake_redis.data


def test_incomplete_store_cannot_be_instantiated():
    class LoadOnlyStore(ProfileStore):
        def load(self, user_id):
            return UserSkillProfile()

    with pytest.raises(TypeError):
        LoadOnlyStore()
