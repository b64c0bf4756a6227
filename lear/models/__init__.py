# lear/models/__init__.py

from .poem import PoemBlock, LIMERICK_LINE_COUNT
from .constraints import LimerickConstraints, LETTER_KEY_LENGTH, MIN_POEM_COUNT, MAX_POEM_COUNT
from .end_word import PoemEndWordResult, EndWordValidationResult
from .generation import GenerationStage, GenerationResult

__all__ = [
    'PoemBlock',
    'LIMERICK_LINE_COUNT',
    'LimerickConstraints',
    'LETTER_KEY_LENGTH',
    'MIN_POEM_COUNT',
    'MAX_POEM_COUNT',
    'PoemEndWordResult',
    'EndWordValidationResult',
    'GenerationStage',
    'GenerationResult'
]
