# lear/models/end_word.py

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any


@dataclass
class PoemEndWordResult:
    """End-word initial check for a single poem"""

    poem_index: int
    is_valid: bool
    checked: bool
    terminal_words: List[str] = field(default_factory=list)
    mismatched_lines: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "poem_index": self.poem_index,
            "is_valid": self.is_valid,
            "checked": self.checked,
            "terminal_words": self.terminal_words,
            "mismatched_lines": self.mismatched_lines
        }


@dataclass
class EndWordValidationResult:
    """Result of checking every poem of a generation against a letter key"""

    letter_key: str
    overall_valid: bool
    poem_results: List[PoemEndWordResult]
    validation_summary: str
    error_details: Optional[str] = None

    @property
    def poem_count(self) -> int:
        return len(self.poem_results)

    @property
    def failing_poems(self) -> List[int]:
        return [r.poem_index for r in self.poem_results if not r.is_valid]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "letter_key": self.letter_key,
            "overall_valid": self.overall_valid,
            "poem_count": self.poem_count,
            "poem_results": [r.to_dict() for r in self.poem_results],
            "validation_summary": self.validation_summary,
            "error_details": self.error_details
        }
