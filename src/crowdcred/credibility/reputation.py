# src/crowdcred/credibility/reputation.py

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class ReputationProvider(ABC):
    """Looks up a reporter's reputation bonus (0-5) from their history."""

    @abstractmethod
    def lookup(self, user_id: str) -> float:
        ...


class StaticReputationProvider(ReputationProvider):
    """
    Gives every reporter the same bonus.

    Stands in for a user-history service until one is wired in.
    """

    def __init__(self, bonus: float = 3.0):
        if not (0 <= bonus <= 5):
            raise ValueError("Reputation bonus must be between 0 and 5")
        self.bonus = bonus

    def lookup(self, user_id: str) -> float:
        logger.debug(f"Static reputation bonus {self.bonus} for user {user_id}")
        return self.bonus
