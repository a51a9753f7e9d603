"""Outcome publisher port (interface)"""
from abc import ABC, abstractmethod
from typing import Dict, Any


class OutcomePublisherPort(ABC):
    """Port for publishing settled spin outcomes to history/analytics consumers"""

    @abstractmethod
    def publish_outcome(self, outcome_data: Dict[str, Any], trace_headers: Dict[str, str]) -> None:
        """Publish a settled spin outcome"""
        pass
