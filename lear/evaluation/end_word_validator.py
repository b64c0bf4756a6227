# lear/evaluation/end_word_validator.py

import logging
from typing import List, Sequence, Union

from lear.models.poem import PoemBlock, LIMERICK_LINE_COUNT
from lear.models.end_word import PoemEndWordResult, EndWordValidationResult
from lear.evaluation.text_parsing import (
    normalize_letters,
    has_full_key,
    extract_terminal_word,
    split_into_poems,
)

PoemLines = Union[PoemBlock, Sequence[str]]


def _lines_of(poem: PoemLines) -> List[str]:
    return list(poem.lines) if isinstance(poem, PoemBlock) else list(poem or [])


def _check_poem(poem: PoemLines, letter_key: str, poem_index: int = 0) -> PoemEndWordResult:
    lines = _lines_of(poem)

    # Nothing to check: no full key, or too few lines
    if not has_full_key(letter_key) or len(lines) < LIMERICK_LINE_COUNT:
        return PoemEndWordResult(poem_index=poem_index, is_valid=True, checked=False)

    terminal_words = [extract_terminal_word(line) for line in lines[:LIMERICK_LINE_COUNT]]
    mismatched = [
        position + 1
        for position, (word, letter) in enumerate(zip(terminal_words, letter_key))
        if word[:1].upper() != letter
    ]

    return PoemEndWordResult(
        poem_index=poem_index,
        is_valid=not mismatched,
        checked=True,
        terminal_words=terminal_words,
        mismatched_lines=mismatched
    )


def poem_satisfies_key(poem_lines: PoemLines, letter_key: str) -> bool:
    """
    Check the end-word initials of one poem against a letter key.

    Vacuously true when the key does not have five letters or the poem has
    fewer than five lines. Otherwise the first letter of each of the first
    five terminal words must match the key letter at the same position.
    """
    return _check_poem(poem_lines, normalize_letters(letter_key)).is_valid


def all_poems_satisfy_key(raw_text: str, letter_key: str) -> bool:
    """False when the text holds no poems, else every poem must satisfy the key"""
    poems = split_into_poems(raw_text)
    if not poems:
        return False
    key = normalize_letters(letter_key)
    return all(poem_satisfies_key(poem, key) for poem in poems)


class EndWordValidator:
    """
    Validates generated limericks against the end-word initial rule.

    ``is_valid`` is the boolean gate the generator uses; ``validate`` gives
    the same verdict with per-poem details for logging and API responses.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def is_valid(self, raw_text: str, letter_key: str) -> bool:
        return all_poems_satisfy_key(raw_text, letter_key)

    def validate(self, raw_text: str, letter_key: str) -> EndWordValidationResult:
        """
        Validate every poem in the raw text.

        Args:
            raw_text: Raw model output
            letter_key: Letter key (normalized again here)

        Returns:
            EndWordValidationResult with validation details
        """
        key = normalize_letters(letter_key)
        poems = split_into_poems(raw_text)
        poem_results = [_check_poem(poem, key, index) for index, poem in enumerate(poems)]

        if not poems:
            summary = "No poems found in generated text"
            return EndWordValidationResult(
                letter_key=key,
                overall_valid=False,
                poem_results=[],
                validation_summary=summary,
                error_details=summary
            )

        failing = [r for r in poem_results if not r.is_valid]
        if failing:
            details = "; ".join(
                f"poem {r.poem_index + 1}: lines {', '.join(str(n) for n in r.mismatched_lines)} "
                f"end with {[r.terminal_words[n - 1] for n in r.mismatched_lines]}"
                for r in failing
            )
            summary = f"{len(failing)} of {len(poem_results)} poems break the end-word rule for '{key}'"
            self.logger.debug(f"End-word validation failed: {details}")
            return EndWordValidationResult(
                letter_key=key,
                overall_valid=False,
                poem_results=poem_results,
                validation_summary=summary,
                error_details=details
            )

        if has_full_key(key):
            summary = f"All {len(poem_results)} poems follow the end-word rule for '{key}'"
        else:
            summary = "No five-letter key, end words not checked"

        return EndWordValidationResult(
            letter_key=key,
            overall_valid=True,
            poem_results=poem_results,
            validation_summary=summary
        )
