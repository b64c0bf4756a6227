# lear/generation/limerick_generator.py

import logging
import math
import re
from typing import Any, Optional

from lear.llm.base_llm import BaseLLM, LLMError
from lear.models.constraints import LimerickConstraints, MIN_POEM_COUNT, MAX_POEM_COUNT
from lear.models.generation import GenerationStage, GenerationResult
from lear.evaluation.text_parsing import normalize_letters
from lear.evaluation.end_word_validator import EndWordValidator
from lear.prompts.limerick_prompts import LimerickPromptBuilder
from lear.refinement.end_word_refiner import EndWordRefiner, DEFAULT_REPAIR_TEMPERATURE

DEFAULT_TEMPERATURE = 0.7

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_FALSE_STRINGS = {"", "0", "false", "no", "off"}


class GenerationError(Exception):
    """Raised when limerick generation fails for a reason other than the provider"""
    pass


def parse_count(value: Any, maximum: int = MAX_POEM_COUNT) -> int:
    """
    Read a poem count from loosely typed input and clamp it to [1, maximum].

    Strings are read by their leading integer ("3 poems" -> 3, "2.7" -> 2).
    Missing, zero or unreadable values fall back to 1.
    """
    number = 0
    if value is None or isinstance(value, bool):
        number = 0
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = int(value) if math.isfinite(value) else 0
    else:
        match = _LEADING_INT.match(str(value))
        number = int(match.group(1)) if match else 0

    if not number:
        number = MIN_POEM_COUNT
    return max(MIN_POEM_COUNT, min(maximum, number))


def parse_flag(value: Any) -> bool:
    """Truthiness, except that strings like "false" or "0" read as False"""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


def build_constraints(letters: Any = "", count: Any = None, translate: Any = False,
                      max_count: int = MAX_POEM_COUNT) -> LimerickConstraints:
    """Turn raw request fields into normalized constraints"""
    return LimerickConstraints(
        letter_key=normalize_letters(letters),
        count=parse_count(count, max_count),
        translate=parse_flag(translate)
    )


class LimerickGenerator:
    """
    Generates architectural limericks with at most one repair round.

    The request runs through fixed stages:

        INIT -> FIRST_REQUESTED -> VALIDATING -> DONE
                                             \\-> REPAIR_REQUESTED -> REPAIR_VALIDATING -> DONE

    A repair is only requested when a full five-letter key is present and
    the first text breaks the end-word rule. The repaired text replaces the
    original only if it passes; otherwise the original is returned.
    Provider failures propagate as ``LLMError``.
    """

    def __init__(self, llm: BaseLLM,
                 prompt_builder: Optional[LimerickPromptBuilder] = None,
                 validator: Optional[EndWordValidator] = None,
                 refiner: Optional[EndWordRefiner] = None,
                 temperature: float = DEFAULT_TEMPERATURE,
                 repair_temperature: float = DEFAULT_REPAIR_TEMPERATURE):
        self.llm = llm
        self.prompt_builder = prompt_builder or LimerickPromptBuilder()
        self.validator = validator or EndWordValidator()
        self.refiner = refiner or EndWordRefiner(llm, self.prompt_builder, temperature=repair_temperature)
        self.temperature = temperature
        self.logger = logging.getLogger(self.__class__.__name__)

    def generate(self, constraints: LimerickConstraints) -> GenerationResult:
        """Run one request through the generation stages"""
        try:
            return self._run_stages(constraints)
        except LLMError:
            raise
        except Exception as e:
            raise GenerationError(f"Limerick generation failed: {e}") from e

    def generate_text(self, letters: Any = "", count: Any = None, translate: Any = False) -> str:
        """Convenience wrapper taking raw request fields and returning only the text"""
        return self.generate(build_constraints(letters, count, translate)).text

    def _run_stages(self, constraints: LimerickConstraints) -> GenerationResult:
        stages = [GenerationStage.INIT]
        self.logger.info(
            f"Generating {constraints.count} limerick(s), key='{constraints.letter_key}', "
            f"translate={constraints.translate}"
        )

        stages.append(GenerationStage.FIRST_REQUESTED)
        first_text = self._request_first(constraints)
        result = GenerationResult(text=first_text, original_text=first_text, stages=stages)

        stages.append(GenerationStage.VALIDATING)
        if not constraints.has_letter_key:
            self.logger.info("No five-letter key, skipping end-word validation")
            return self._finish(result)

        result.validation = self.validator.validate(first_text, constraints.letter_key)
        if not self.refiner.should_refine(result.validation):
            self.logger.info("First generation passed end-word validation")
            return self._finish(result)

        self.logger.info(f"First generation failed: {result.validation.validation_summary}")

        stages.append(GenerationStage.REPAIR_REQUESTED)
        repaired_text = self.refiner.refine(first_text, constraints.letter_key)
        result.repaired_text = repaired_text

        stages.append(GenerationStage.REPAIR_VALIDATING)
        result.repair_validation = self.validator.validate(repaired_text, constraints.letter_key)
        if result.repair_validation.overall_valid:
            self.logger.info("Repair accepted")
            result.text = repaired_text
            result.repair_accepted = True
        else:
            self.logger.info(
                f"Repair rejected ({result.repair_validation.validation_summary}), keeping original text"
            )

        return self._finish(result)

    def _request_first(self, constraints: LimerickConstraints) -> str:
        messages = self.prompt_builder.generation_messages(constraints)
        return self.llm.chat(messages, temperature=self.temperature)

    def _finish(self, result: GenerationResult) -> GenerationResult:
        result.stages.append(GenerationStage.DONE)
        return result
