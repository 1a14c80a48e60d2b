"""
Skill Profile - Per-topic and per-user calibration state.

Features:
    - Frozen dataclasses: every update produces a new value
    - Bounded window of the last answers per topic (feeds Rapid-Pivot)
    - Direct / Inferred provenance as a tagged variant
    - Dict serialization for the profile store
"""

import math
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .thresholds import INITIAL_CONFIDENCE, MAX_CONFIDENCE, MIN_CONFIDENCE, PIVOT_WINDOW
from .tiers import Tier


# ==================== Answer Events ====================

@dataclass(frozen=True)
class AnswerRecord:
    """
    One answer event coming from the UI.

    `tier_at_answer_time` is informational only: scoring uses the tier
    stored on the topic profile.
    """
    topic_id: str
    is_correct: bool
    time_to_answer: float  # Seconds
    tier_at_answer_time: Tier = Tier.MEDIUM
    timestamp: float = 0.0  # Unix timestamp

    def normalized(self) -> "AnswerRecord":
        """Clamp negative or non-finite latency to 0."""
        t = self.time_to_answer
        if t is None or not math.isfinite(t) or t < 0:
            return replace(self, time_to_answer=0.0)
        return self


@dataclass(frozen=True)
class RecentAnswer:
    """Outcome and latency of one answer, kept in the pivot window."""
    is_correct: bool
    time_to_answer: float


# ==================== Provenance ====================

@dataclass(frozen=True)
class Direct:
    """Profile built from the user's own answers."""


@dataclass(frozen=True)
class Inferred:
    """Profile copied from mastery of a related topic."""
    source: str


Provenance = Union[Direct, Inferred]

DIRECT = Direct()


# ==================== Topic Profile ====================

@dataclass(frozen=True)
class SubtopicSkillProfile:
    """Skill state for a single topic."""
    topic_id: str
    current_tier: Tier = Tier.MEDIUM
    total_attempted: int = 0
    total_correct: int = 0
    average_speed: float = 0.0  # Running mean latency, seconds
    confidence_score: int = INITIAL_CONFIDENCE
    consecutive_correct: int = 0
    consecutive_wrong: int = 0
    last_answer_time: float = 0.0
    provenance: Provenance = DIRECT
    recent: Tuple[RecentAnswer, ...] = ()

    @property
    def accuracy_ratio(self) -> float:
        if self.total_attempted == 0:
            return 0.0
        return self.total_correct / self.total_attempted

    @property
    def is_inferred(self) -> bool:
        return isinstance(self.provenance, Inferred)

    @property
    def inferred_from(self) -> Optional[str]:
        return self.provenance.source if isinstance(self.provenance, Inferred) else None

    @property
    def is_directly_assessed(self) -> bool:
        """Has its own answers and no inferred tag."""
        return self.total_attempted > 0 and not self.is_inferred

    def is_mastered(self, min_confidence: int, min_attempts: int) -> bool:
        return self.confidence_score >= min_confidence and self.total_attempted >= min_attempts

    def with_answer(self, record: AnswerRecord) -> "SubtopicSkillProfile":
        """
        Fold one answer into counters, streaks, average speed and the window.

        Confidence and tier are left alone; the pipeline updates them
        in later steps.
        """
        attempted = self.total_attempted + 1
        correct = self.total_correct + (1 if record.is_correct else 0)

        if record.is_correct:
            streak_right, streak_wrong = self.consecutive_correct + 1, 0
        else:
            streak_right, streak_wrong = 0, self.consecutive_wrong + 1

        # Incremental mean: ((n-1)*avg + sample) / n
        avg = ((attempted - 1) * self.average_speed + record.time_to_answer) / attempted

        window = (self.recent + (RecentAnswer(record.is_correct, record.time_to_answer),))
        window = window[-PIVOT_WINDOW:]

        return replace(
            self,
            total_attempted=attempted,
            total_correct=correct,
            consecutive_correct=streak_right,
            consecutive_wrong=streak_wrong,
            average_speed=avg,
            last_answer_time=record.timestamp,
            recent=window,
        )

    # ==================== Serialization ====================

    def to_dict(self) -> dict:
        return {
            "topic_id": self.topic_id,
            "current_tier": self.current_tier.value,
            "total_attempted": self.total_attempted,
            "total_correct": self.total_correct,
            "accuracy_ratio": self.accuracy_ratio,
            "average_speed": self.average_speed,
            "confidence_score": self.confidence_score,
            "consecutive_correct": self.consecutive_correct,
            "consecutive_wrong": self.consecutive_wrong,
            "last_answer_time": self.last_answer_time,
            "is_inferred": self.is_inferred,
            "inferred_from": self.inferred_from,
            "recent": [[a.is_correct, a.time_to_answer] for a in self.recent],
        }

    @classmethod
    def from_dict(cls, data: dict, topic_id: Optional[str] = None) -> "SubtopicSkillProfile":
        tid = data.get("topic_id") or topic_id
        source = data.get("inferred_from")
        provenance = Inferred(source) if data.get("is_inferred") and source else DIRECT

        attempted = max(0, int(data.get("total_attempted", 0)))
        correct = min(attempted, max(0, int(data.get("total_correct", 0))))

        recent = tuple(
            RecentAnswer(bool(ok), float(t)) for ok, t in data.get("recent", [])
        )[-PIVOT_WINDOW:]

        return cls(
            topic_id=tid,
            current_tier=Tier.parse(data.get("current_tier", Tier.MEDIUM)),
            total_attempted=attempted,
            total_correct=correct,
            average_speed=float(data.get("average_speed", 0.0)),
            confidence_score=clamp_confidence(data.get("confidence_score", INITIAL_CONFIDENCE)),
            consecutive_correct=int(data.get("consecutive_correct", 0)),
            consecutive_wrong=int(data.get("consecutive_wrong", 0)),
            last_answer_time=float(data.get("last_answer_time", 0.0)),
            provenance=provenance,
            recent=recent,
        )


def clamp_confidence(value) -> int:
    """Round and clamp a confidence value into [0, 100]."""
    return int(max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, round(value))))


# ==================== User Profile ====================

class DiagnosticPhase(str, Enum):
    """Calibration phases, in the only order they can be visited."""
    SEED_MISSION = "seed-mission"
    CALIBRATING = "calibrating"
    COMPLETE = "complete"

    @property
    def rank(self) -> int:
        return list(DiagnosticPhase).index(self)

    @classmethod
    def parse(cls, value) -> "DiagnosticPhase":
        if isinstance(value, DiagnosticPhase):
            return value
        # "active" from older snapshots is the same terminal state
        if value == "active":
            return cls.COMPLETE
        for phase in cls:
            if phase.value == value:
                return phase
        raise ValueError(f"Unknown diagnostic phase: {value!r}")


@dataclass(frozen=True)
class UserSkillProfile:
    """All calibration state for one user."""
    topics: Dict[str, SubtopicSkillProfile] = field(default_factory=dict)
    diagnostic_phase: DiagnosticPhase = DiagnosticPhase.SEED_MISSION
    seed_mission_completed: bool = False
    total_questions_answered: int = 0
    calibration_complete: bool = False
    last_updated: float = 0.0

    def get_topic(self, topic_id: str) -> Optional[SubtopicSkillProfile]:
        return self.topics.get(topic_id)

    def with_topic(self, profile: SubtopicSkillProfile) -> "UserSkillProfile":
        """Copy with one topic profile added or replaced."""
        topics = dict(self.topics)
        topics[profile.topic_id] = profile
        return replace(self, topics=topics)

    def with_topics(self, profiles) -> "UserSkillProfile":
        topics = dict(self.topics)
        for p in profiles:
            topics[p.topic_id] = p
        return replace(self, topics=topics)

    def directly_assessed_count(self) -> int:
        return sum(1 for p in self.topics.values() if p.is_directly_assessed)

    def touch(self, now: Optional[float] = None) -> "UserSkillProfile":
        return replace(self, last_updated=time.time() if now is None else now)

    # ==================== Serialization ====================

    def to_dict(self) -> dict:
        """Serialize to plain dict (for Redis storage)."""
        return {
            "topics": {tid: p.to_dict() for tid, p in self.topics.items()},
            "diagnostic_phase": self.diagnostic_phase.value,
            "seed_mission_completed": self.seed_mission_completed,
            "total_questions_answered": self.total_questions_answered,
            "calibration_complete": self.calibration_complete,
            "last_updated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserSkillProfile":
        """Deserialize from dict."""
        topics = {
            tid: SubtopicSkillProfile.from_dict(p, topic_id=tid)
            for tid, p in data.get("topics", {}).items()
        }
        return cls(
            topics=topics,
            diagnostic_phase=DiagnosticPhase.parse(
                data.get("diagnostic_phase", DiagnosticPhase.SEED_MISSION.value)
            ),
            seed_mission_completed=bool(data.get("seed_mission_completed", False)),
            total_questions_answered=int(data.get("total_questions_answered", 0)),
            calibration_complete=bool(data.get("calibration_complete", False)),
            last_updated=float(data.get("last_updated", 0.0)),
        )


def new_user_profile() -> UserSkillProfile:
    """Empty profile for a first-time user."""
    return UserSkillProfile(last_updated=time.time())
