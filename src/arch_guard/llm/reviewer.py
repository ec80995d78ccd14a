"""
AI Reviewer

Sends the diff and the user's architecture rules to a Gemini model
and returns either the CLEAN sentinel or Markdown findings.
"""

import logging
from typing import Optional

from google import genai
from google.genai import types

from ..errors import ArchGuardError
from ..formatting.markdown import CLEAN_SENTINEL, is_clean
from .prompts import PromptBuilder


logger = logging.getLogger(__name__)


class AIReviewError(ArchGuardError):
    """AI call failed or returned an unusable response."""


class AIReviewer:
    """
    Single-shot architecture review through the Gemini API.

    No retry and no streaming: one request, one response, and any
    failure is raised to the caller.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-2.0-flash",
        temperature: float = 0.1,
        client: Optional[genai.Client] = None
    ):
        """
        Initialize AI reviewer.

        Args:
            api_key: Gemini API key
            model_name: Model to call
            temperature: Sampling temperature
            client: Preconfigured SDK client (default: built from api_key)
        """
        if not api_key and client is None:
            raise ValueError("AI API key is required")

        self.model_name = model_name
        self.temperature = temperature
        self.prompt_builder = PromptBuilder()
        self.client = client or genai.Client(api_key=api_key)

    def review(self, diff_text: str, user_rules: str = "") -> str:
        """
        Review a diff against free-form rules.

        Args:
            diff_text: Unified diff of the pull request
            user_rules: Architecture rule text, forwarded verbatim

        Returns:
            "CLEAN" or Markdown describing the violations

        Raises:
            AIReviewError: If the call fails or the response has no text
        """
        prompt = self.prompt_builder.build_review_prompt(diff_text, user_rules)
        logger.info(f"Requesting AI review from {self.model_name}")

        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(temperature=self.temperature),
            )
        except Exception as e:
            logger.error(f"AI review request failed: {e}")
            raise AIReviewError(f"AI review failed: {e}") from e

        text = getattr(response, 'text', None)
        if not text or not text.strip():
            raise AIReviewError("AI review returned an empty response")

        finding = text.strip()
        if is_clean(finding):
            logger.info("AI review: CLEAN")
            return CLEAN_SENTINEL

        logger.info(f"AI review reported findings ({len(finding)} characters)")
        return finding
