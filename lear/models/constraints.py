# lear/models/constraints.py

from dataclasses import dataclass
from typing import Dict, Any

LETTER_KEY_LENGTH = 5
MIN_POEM_COUNT = 1
MAX_POEM_COUNT = 10


@dataclass(frozen=True)
class LimerickConstraints:
    """
    Request-local generation constraints.

    ``letter_key`` is already normalized (0-5 uppercase ASCII letters);
    ``count`` is already clamped.
    """

    letter_key: str = ""
    count: int = MIN_POEM_COUNT
    translate: bool = False

    @property
    def has_letter_key(self) -> bool:
        """End words are only constrained by a full five-letter key"""
        return len(self.letter_key) == LETTER_KEY_LENGTH

    def to_dict(self) -> Dict[str, Any]:
        return {
            "letter_key": self.letter_key,
            "count": self.count,
            "translate": self.translate,
            "has_letter_key": self.has_letter_key
        }
