"""
AI Review Engine

This module provides the optional generative-model reviewer that gives
a second opinion on the diff against free-form architecture rules.
"""

from .prompts import PromptBuilder
from .reviewer import AIReviewer, AIReviewError

__all__ = ['PromptBuilder', 'AIReviewer', 'AIReviewError']
