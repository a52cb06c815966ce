"""Task ranking policy implementations."""

from .base import RankingPolicy
from .deadline import DeadlinePolicy
from .urgency import UrgencyPolicy

__all__ = ['RankingPolicy', 'DeadlinePolicy', 'UrgencyPolicy', 'create_policy']


def create_policy(name: str, config: dict = None) -> RankingPolicy:
    """Create a ranking policy by name."""
    if name.lower() == "urgency":
        return UrgencyPolicy(config)
    elif name.lower() == "deadline":
        return DeadlinePolicy(config)
    else:
        raise ValueError(f"Unknown policy: {name}")
