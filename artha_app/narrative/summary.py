"""Gemini-backed narrative generation with model fallback."""

import os
from typing import Any, Optional

from google import genai

from ..config.defaults import SummaryParams
from ..data.catalog import InstrumentProfile
from ..errors import SummaryGenerationError
from ..logging.config import get_narrative_logger
from ..models.investments import InstrumentId, ProjectionRequest, RankedComparison
from .prompt import build_summary_prompt

logger = get_narrative_logger(__name__)

FALLBACK_SUMMARY = "Unable to generate investment insights at this time. Please try again later."


class SummaryGenerator:
    """Generates an investment summary, trying each configured model in order."""

    def __init__(
        self,
        params: Optional[SummaryParams] = None,
        client: Optional[Any] = None,
        catalog: Optional[dict[InstrumentId, InstrumentProfile]] = None,
    ):
        self.params = params or SummaryParams()
        self._client = client
        self.catalog = catalog

    def _get_client(self) -> Any:
        if self._client is None:
            api_key = os.environ.get(self.params.api_key_env, "").strip()
            if not api_key:
                raise SummaryGenerationError(
                    f"{self.params.api_key_env} is not set",
                    models=list(self.params.models),
                )
            self._client = genai.Client(api_key=api_key)
        return self._client

    def generate(self, request: ProjectionRequest, comparison: RankedComparison) -> str:
        """
        Summarise a ranked comparison.

        Raises:
            SummaryGenerationError: No client is available or every model failed
        """
        prompt = build_summary_prompt(request, comparison, self.params.max_words, self.catalog)
        return self.generate_text(prompt)

    def generate_text(self, prompt: str) -> str:
        client = self._get_client()
        last_error: Optional[Exception] = None

        for model in self.params.models:
            try:
                response = client.models.generate_content(model=model, contents=prompt)
                text = (getattr(response, "text", None) or "").strip()
                if not text:
                    raise ValueError(f"Model '{model}' returned empty text")

                logger.info("Summary generated", model=model, chars=len(text))
                return text

            except Exception as e:
                # Any SDK or transport failure moves on to the next model
                logger.warning("Summary model failed", model=model, error=str(e))
                last_error = e

        raise SummaryGenerationError(
            f"All models failed ({', '.join(self.params.models)}). Last error: {last_error}",
            models=list(self.params.models),
            last_error=last_error,
        )
