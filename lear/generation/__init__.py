# lear/generation/__init__.py

from .limerick_generator import (
    LimerickGenerator,
    GenerationError,
    build_constraints,
    parse_count,
    parse_flag,
)

__all__ = [
    'LimerickGenerator',
    'GenerationError',
    'build_constraints',
    'parse_count',
    'parse_flag'
]
