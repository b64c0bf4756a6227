# lear/models/generation.py

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any

from .end_word import EndWordValidationResult


class GenerationStage(Enum):
    """Stages a single generation request moves through"""
    INIT = "init"
    FIRST_REQUESTED = "first_requested"
    VALIDATING = "validating"
    REPAIR_REQUESTED = "repair_requested"
    REPAIR_VALIDATING = "repair_validating"
    DONE = "done"


@dataclass
class GenerationResult:
    """Final text of a request plus a trace of how it was obtained"""

    text: str
    original_text: str
    stages: List[GenerationStage] = field(default_factory=list)
    repaired_text: Optional[str] = None
    repair_accepted: bool = False
    validation: Optional[EndWordValidationResult] = None
    repair_validation: Optional[EndWordValidationResult] = None

    @property
    def repair_attempted(self) -> bool:
        return GenerationStage.REPAIR_REQUESTED in self.stages

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "original_text": self.original_text,
            "repaired_text": self.repaired_text,
            "stages": [s.value for s in self.stages],
            "repair_attempted": self.repair_attempted,
            "repair_accepted": self.repair_accepted,
            "validation": self.validation.to_dict() if self.validation else None,
            "repair_validation": self.repair_validation.to_dict() if self.repair_validation else None
        }
