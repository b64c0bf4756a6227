# lear/refinement/__init__.py

from .base_refiner import BaseRefiner
from .end_word_refiner import EndWordRefiner

__all__ = [
    'BaseRefiner',
    'EndWordRefiner'
]
