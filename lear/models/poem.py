# lear/models/poem.py

from dataclasses import dataclass, field
from typing import List, Dict, Any

LIMERICK_LINE_COUNT = 5


@dataclass
class PoemBlock:
    """One parsed poem: its ordered, cleaned, non-empty lines."""

    lines: List[str] = field(default_factory=list)

    @property
    def is_checkable(self) -> bool:
        """Only blocks with at least five lines are checked against a key"""
        return len(self.lines) >= LIMERICK_LINE_COUNT

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def to_dict(self) -> Dict[str, Any]:
        return {"lines": list(self.lines)}
