# lear/prompts/__init__.py

from .prompt_manager import PromptManager, PromptTemplate, PromptCategory
from .limerick_prompts import LimerickPromptBuilder, ARCHITECTURAL_VOCABULARY

__all__ = [
    'PromptManager',
    'PromptTemplate',
    'PromptCategory',
    'LimerickPromptBuilder',
    'ARCHITECTURAL_VOCABULARY'
]
