# lear/refinement/end_word_refiner.py

import logging
from typing import Optional

from lear.llm.base_llm import BaseLLM
from lear.models.constraints import LETTER_KEY_LENGTH
from lear.models.end_word import EndWordValidationResult
from lear.prompts.limerick_prompts import LimerickPromptBuilder
from lear.refinement.base_refiner import BaseRefiner

DEFAULT_REPAIR_TEMPERATURE = 0.5


class EndWordRefiner(BaseRefiner):
    """
    Asks the model, acting as a strict editor, to fix end-word initials.

    One call per ``refine``; the caller decides whether to keep the result.
    Provider errors are not caught here.
    """

    def __init__(self, llm: BaseLLM, prompt_builder: Optional[LimerickPromptBuilder] = None,
                 temperature: float = DEFAULT_REPAIR_TEMPERATURE):
        self.llm = llm
        self.prompt_builder = prompt_builder or LimerickPromptBuilder()
        self.temperature = temperature
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def name(self) -> str:
        return "end_word_refiner"

    def should_refine(self, validation: EndWordValidationResult) -> bool:
        """Only a full key that the text failed calls for a repair"""
        if validation is None:
            return False
        return len(validation.letter_key) == LETTER_KEY_LENGTH and not validation.overall_valid

    def refine(self, text: str, letter_key: str) -> str:
        """Request a minimally edited version of the text that follows the key"""
        self.logger.info(f"Requesting end-word repair for key '{letter_key}'")
        messages = self.prompt_builder.repair_messages(text, letter_key)
        return self.llm.chat(messages, temperature=self.temperature)
