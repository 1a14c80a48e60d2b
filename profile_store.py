"""
Profile Store - Persistence for user skill profiles.

Key Structure:
    {prefix}:{user_id} -> String (JSON snapshot of the whole UserSkillProfile)

A snapshot is written whole, so concurrent writers for the same user
resolve as last-writer-wins.
"""

import os
import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Dict, Optional

import redis
from dotenv import load_dotenv

from calibration.skill_profile import UserSkillProfile, new_user_profile

# Load environment variables from .env
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "skill_profile"


class ProfileStore(ABC):
    """Load/save contract the calibration engine relies on."""

    @abstractmethod
    def load(self, user_id: str) -> UserSkillProfile:
        ...

    @abstractmethod
    def save(self, user_id: str, profile: UserSkillProfile) -> UserSkillProfile:
        ...

    @abstractmethod
    def reset(self, user_id: str):
        """Discard a user's profile (testing/support only)."""

    @staticmethod
    def _stamp(profile: UserSkillProfile) -> UserSkillProfile:
        return profile.touch(time.time())


class RedisProfileStore(ProfileStore):
    def __init__(self, client: Optional[redis.Redis] = None, key_prefix: Optional[str] = None):
        """Connect to Redis using environment variables unless a client is given."""
        self.client = client or redis.Redis(
            host=os.getenv("REDIS_HOST", "localhost"),
            port=int(os.getenv("REDIS_PORT", 6379)),
            password=os.getenv("REDIS_PASSWORD", None),
            db=int(os.getenv("REDIS_DB", 0)),
            decode_responses=True  # Return strings instead of bytes
        )
        self.key_prefix = key_prefix or os.getenv("SKILL_PROFILE_KEY_PREFIX", DEFAULT_KEY_PREFIX)

    # ==================== Key Builders ====================

    def _profile_key(self, user_id: str) -> str:
        """Redis key for a user's profile snapshot."""
        return f"{self.key_prefix}:{user_id}"

    # ==================== Profile Management ====================

    def load(self, user_id: str) -> UserSkillProfile:
        """
        Retrieve a user's profile.

        Args:
            user_id: User to load

        Returns:
            Stored profile, or a fresh one if nothing (readable) is stored
        """
        raw = self.client.get(self._profile_key(user_id))
        if raw is None:
            return new_user_profile()

        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")

        try:
            return UserSkillProfile.from_dict(json.loads(raw))
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Discarding unreadable skill profile for %s: %s", user_id, e)
            return new_user_profile()

    def save(self, user_id: str, profile: UserSkillProfile) -> UserSkillProfile:
        """
        Store a user's profile, stamping last_updated.

        Returns:
            The profile as stored
        """
        profile = self._stamp(profile)
        self.client.set(self._profile_key(user_id), json.dumps(profile.to_dict()))
        return profile

    def reset(self, user_id: str):
        self.client.delete(self._profile_key(user_id))

    def exists(self, user_id: str) -> bool:
        return bool(self.client.exists(self._profile_key(user_id)))


class InMemoryProfileStore(ProfileStore):
    """Dict-backed store for tests and single-process use."""

    def __init__(self):
        self._profiles: Dict[str, dict] = {}

    def load(self, user_id: str) -> UserSkillProfile:
        data = self._profiles.get(user_id)
        if data is None:
            return new_user_profile()
        return UserSkillProfile.from_dict(data)

    def save(self, user_id: str, profile: UserSkillProfile) -> UserSkillProfile:
        profile = self._stamp(profile)
        # Keep a serialized copy so callers can't alias stored state
        self._profiles[user_id] = profile.to_dict()
        return profile

    def reset(self, user_id: str):
        self._profiles.pop(user_id, None)

    def exists(self, user_id: str) -> bool:
        return user_id in self._profiles
