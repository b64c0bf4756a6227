# lear/evaluation/text_parsing.py

"""
Tokenization rules for generated limerick text.

Three small steps, each usable on its own:

* ``normalize_letters`` turns arbitrary user input into a letter key.
* ``split_into_poems`` cuts raw model output into poems and lines.
* ``extract_terminal_word`` finds the last alphabetic word of a line.
"""

import re
import string
from typing import List, Any

from lear.models.poem import PoemBlock
from lear.models.constraints import LETTER_KEY_LENGTH as KEY_LENGTH

# Full-width Latin letters sit at a fixed offset above ASCII
FULLWIDTH_OFFSET = 0xFEE0
_FULLWIDTH_RANGES = (("Ａ", "Ｚ"), ("ａ", "ｚ"))

# Stripped before the word is located
CLOSING_PUNCTUATION = ")»”’"
# Allowed to trail the word
TRAILING_PUNCTUATION = ".!?;,:\"'»”’)]"
# Characters allowed inside a word after its first letter
WORD_INNER_CHARS = set(string.ascii_letters) | {"-", "'"}

_NUMBERING_PREFIX = re.compile(r"^\s*\d+\)\s*")


def _to_halfwidth(ch: str) -> str:
    for low, high in _FULLWIDTH_RANGES:
        if low <= ch <= high:
            return chr(ord(ch) - FULLWIDTH_OFFSET)
    return ch


def normalize_letters(value: Any) -> str:
    """
    Normalize user input into a letter key of at most five uppercase letters.

    Full-width Latin letters are folded to ASCII, anything that is not an
    ASCII letter is dropped, the rest is uppercased and cut to five.
    Never raises; empty and falsy input give "".
    """
    text = str(value or "")
    halfwidth = "".join(_to_halfwidth(ch) for ch in text)
    letters = "".join(ch for ch in halfwidth if ch in string.ascii_letters)
    return letters.upper()[:KEY_LENGTH]


def has_full_key(letter_key: str) -> bool:
    """A key only constrains generation when exactly five letters survive"""
    return len(letter_key or "") == KEY_LENGTH


def extract_terminal_word(line: Any) -> str:
    """
    Return the last alphabetic word of a line, or "" when there is none.

    The line is trimmed, closing brackets/quotes and trailing sentence
    punctuation are removed, then the trailing run of letters, hyphens and
    apostrophes is taken. The word starts at the first letter of that run.
    """
    text = str(line or "").strip()
    text = text.rstrip(CLOSING_PUNCTUATION)
    text = text.rstrip(TRAILING_PUNCTUATION)

    end = len(text)
    start = end
    while start > 0 and text[start - 1] in WORD_INNER_CHARS:
        start -= 1
    run = text[start:end]

    # The word has to begin with a letter, not a hyphen or apostrophe
    run = run.lstrip("-'")
    return run


def strip_numbering(line: str) -> str:
    """Remove a leading "1)" style enumeration marker"""
    return _NUMBERING_PREFIX.sub("", line, count=1)


def split_into_poems(raw_text: Any) -> List[PoemBlock]:
    """
    Split raw model output into poems.

    Poems are separated by one or more blank (whitespace-only) lines.
    Numbering prefixes are stripped and empty lines dropped; blocks left
    with no lines are discarded, so blank input yields no poems.
    """
    text = str(raw_text or "").strip()
    if not text:
        return []

    blocks: List[List[str]] = []
    current: List[str] = []
    for raw_line in text.splitlines():
        if not raw_line.strip():
            if current:
                blocks.append(current)
                current = []
            continue
        current.append(raw_line)
    if current:
        blocks.append(current)

    poems = []
    for block in blocks:
        lines = [strip_numbering(line) for line in block]
        lines = [line for line in lines if line]
        if lines:
            poems.append(PoemBlock(lines=lines))
    return poems
