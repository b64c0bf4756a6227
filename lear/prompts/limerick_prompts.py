# lear/prompts/limerick_prompts.py

from typing import Dict, List, Optional

from lear.models.constraints import LimerickConstraints
from .prompt_manager import PromptManager

ARCHITECTURAL_VOCABULARY = (
    "lintel", "gable", "pier", "vault", "mullion", "oculus", "truss", "soffit",
    "plinth", "clerestory", "spandrel", "balustrade", "wythe", "quoins",
    "corbel", "voussoir",
)

Messages = List[Dict[str, str]]


class LimerickPromptBuilder:
    """
    Builds the chat messages sent to the model.

    Pure: no I/O beyond the templates the PromptManager loaded at start-up.
    """

    def __init__(self, prompt_manager: Optional[PromptManager] = None):
        self.prompt_manager = prompt_manager or PromptManager()

    def _directives(self, template_name: str, letter_key: str) -> str:
        return "\n".join(
            self.prompt_manager.format_prompt(template_name, line_number=index + 1, letter=letter)
            for index, letter in enumerate(letter_key)
        )

    def build_generation_prompt(self, constraints: LimerickConstraints) -> str:
        """System instruction for the first request"""
        if constraints.has_letter_key:
            end_word_rule = self.prompt_manager.format_prompt(
                'end_word_rule',
                letter_directives=self._directives('end_word_directive', constraints.letter_key)
            )
        else:
            end_word_rule = self.prompt_manager.format_prompt('unconstrained_rule')

        if constraints.translate:
            translation_rule = self.prompt_manager.format_prompt('translation_rule')
        else:
            translation_rule = self.prompt_manager.format_prompt('english_only_rule')

        return self.prompt_manager.format_prompt(
            'limerick_generation',
            count=constraints.count,
            vocabulary=", ".join(ARCHITECTURAL_VOCABULARY),
            end_word_rule=end_word_rule,
            translation_rule=translation_rule
        )

    def build_repair_prompt(self, failing_text: str, letter_key: str) -> str:
        """User message for the repair request, ending with the failing text verbatim"""
        return self.prompt_manager.format_prompt(
            'end_word_repair',
            letter_directives=self._directives('repair_directive', letter_key),
            failing_text=failing_text
        )

    def generation_messages(self, constraints: LimerickConstraints) -> Messages:
        return [
            {"role": "system", "content": self.build_generation_prompt(constraints)},
            {"role": "user", "content": self.prompt_manager.format_prompt('generation_trigger')},
        ]

    def repair_messages(self, failing_text: str, letter_key: str) -> Messages:
        return [
            {"role": "system", "content": self.prompt_manager.format_prompt('repair_editor_system')},
            {"role": "user", "content": self.build_repair_prompt(failing_text, letter_key)},
        ]
