"""Prompt construction for AI issue analysis."""

from .builder import PromptBuilder
from .constants import RESPONSE_REQUESTS

__all__ = ["PromptBuilder", "RESPONSE_REQUESTS"]
