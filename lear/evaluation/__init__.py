# lear/evaluation/__init__.py

from .text_parsing import (
    KEY_LENGTH,
    normalize_letters,
    has_full_key,
    extract_terminal_word,
    strip_numbering,
    split_into_poems,
)
from .end_word_validator import (
    EndWordValidator,
    poem_satisfies_key,
    all_poems_satisfy_key,
)

__all__ = [
    "KEY_LENGTH",
    "normalize_letters",
    "has_full_key",
    "extract_terminal_word",
    "strip_numbering",
    "split_into_poems",
    "EndWordValidator",
    "poem_satisfies_key",
    "all_poems_satisfy_key",
]
