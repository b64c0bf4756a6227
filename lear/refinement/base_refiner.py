# lear/refinement/base_refiner.py

from abc import ABC, abstractmethod
from lear.models.end_word import EndWordValidationResult


class BaseRefiner(ABC):
    """Simple base class for all refiners"""

    @abstractmethod
    def refine(self, text: str, letter_key: str) -> str:
        """Return a corrected version of the text"""
        pass

    @abstractmethod
    def should_refine(self, validation: EndWordValidationResult) -> bool:
        """Decide if refinement is needed based on validation"""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Refiner name for logging"""
        pass
