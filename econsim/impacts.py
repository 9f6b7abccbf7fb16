"""
Impact Result Types

Qualitative outcome records produced by the classifier: labeled effects
grouped into the four stakeholder sections.
"""

from dataclasses import dataclass
from enum import Enum

from .policies import PolicyCategory


class ImpactLevel(Enum):
    """Five-point qualitative outcome scale."""
    STRONG_NEGATIVE = "strong_negative"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    STRONG_POSITIVE = "strong_positive"

    @property
    def score(self) -> int:
        """Numeric score used by the projector."""
        return LEVEL_SCORES[self]


# Single bridge between the narrative and the numbers.
LEVEL_SCORES = {
    ImpactLevel.STRONG_POSITIVE: 2,
    ImpactLevel.POSITIVE: 1,
    ImpactLevel.NEUTRAL: 0,
    ImpactLevel.NEGATIVE: -1,
    ImpactLevel.STRONG_NEGATIVE: -2,
}

SECTION_ROLES = ("consumer", "producer", "worker", "macro")


@dataclass(frozen=True)
class ImpactItem:
    """One labeled effect."""
    effect: str
    level: ImpactLevel

    def to_dict(self) -> dict:
        return {"effect": self.effect, "level": self.level.value}


@dataclass(frozen=True)
class ImpactSection:
    """
    Effects on one stakeholder group.

    Item order matters for display only.
    """
    title: str
    items: tuple[ImpactItem, ...]
    recommendation: str

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "items": [item.to_dict() for item in self.items],
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class PolicyImpactResult:
    """
    Qualitative impact narrative for one policy.

    All four sections are always present, in the order consumer, producer,
    worker, macro.
    """
    policy_category: PolicyCategory
    policy_name: str
    consumer: ImpactSection
    producer: ImpactSection
    worker: ImpactSection
    macro: ImpactSection

    @property
    def sections(self) -> tuple[ImpactSection, ...]:
        """The four sections in their fixed role order."""
        return tuple(getattr(self, role) for role in SECTION_ROLES)

    def to_dict(self) -> dict:
        result = {
            "policyCategory": self.policy_category.value,
            "policyName": self.policy_name,
        }
        for role in SECTION_ROLES:
            result[role] = getattr(self, role).to_dict()
        return result


def items(*pairs: tuple[str, ImpactLevel]) -> tuple[ImpactItem, ...]:
    """Build an item tuple from ``(effect, level)`` pairs."""
    return tuple(ImpactItem(effect, level) for effect, level in pairs)
