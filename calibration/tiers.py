"""
Tiers - Ordered difficulty levels and one-step tier moves.

Tiers are ordered Easy < Medium < Hard. A tier only ever moves one
step at a time, so promote/demote saturate at the ends instead of
skipping a level.
"""

from enum import Enum
from typing import Tuple


class Tier(str, Enum):
    """Difficulty tier for a topic."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @property
    def rank(self) -> int:
        """1 for Easy, 2 for Medium, 3 for Hard."""
        return _ORDER.index(self) + 1

    def promote(self) -> "Tier":
        """One step up, no-op at Hard."""
        return _ORDER[min(len(_ORDER) - 1, _ORDER.index(self) + 1)]

    def demote(self) -> "Tier":
        """One step down, no-op at Easy."""
        return _ORDER[max(0, _ORDER.index(self) - 1)]

    def step_toward(self, target: "Tier") -> "Tier":
        """At most one step in the direction of `target`."""
        if target.rank > self.rank:
            return self.promote()
        if target.rank < self.rank:
            return self.demote()
        return self

    @classmethod
    def parse(cls, value) -> "Tier":
        """Accept a Tier or its name in any case ("hard", "Hard", "HARD")."""
        if isinstance(value, Tier):
            return value
        for tier in _ORDER:
            if str(value).strip().lower() == tier.value.lower():
                return tier
        raise ValueError(f"Unknown tier: {value!r}")

    def __lt__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank >= other.rank


_ORDER: Tuple[Tier, ...] = (Tier.EASY, Tier.MEDIUM, Tier.HARD)


class TierChange(str, Enum):
    """Direction of a tier transition."""
    PROMOTED = "promoted"
    DEMOTED = "demoted"
    UNCHANGED = "unchanged"


def compare_tiers(before: Tier, after: Tier) -> TierChange:
    """Classify the move from `before` to `after`."""
    if after.rank > before.rank:
        return TierChange.PROMOTED
    if after.rank < before.rank:
        return TierChange.DEMOTED
    return TierChange.UNCHANGED


def average_tier(tiers) -> Tier:
    """
    Collapse several tiers into one representative tier.

    Mean rank >= 2.5 is Hard, >= 1.5 is Medium, anything lower is Easy.
    An empty input averages to Medium.
    """
    tiers = list(tiers)
    if not tiers:
        return Tier.MEDIUM

    avg = sum(t.rank for t in tiers) / len(tiers)
    if avg >= 2.5:
        return Tier.HARD
    if avg >= 1.5:
        return Tier.MEDIUM
    return Tier.EASY
