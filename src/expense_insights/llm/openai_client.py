import os

from openai import OpenAI

from expense_insights.errors import EmptyResponseError, MissingAPIKeyError
from expense_insights.logger import get_logger

from .base import TextGenerator

logger = get_logger(__name__)

SYSTEM_INSTRUCTION = "You are a helpful personal finance assistant."


class OpenAITextGenerator(TextGenerator):
    """
    Text generation over an OpenAI-compatible chat completions endpoint.

    Gemini exposes one at ``GEMINI_BASE_URL``, so the same client serves both
    providers; only the base URL and model names differ.
    """

    def __init__(self, api_key: str | None = None, base_url: str | None = None, temperature: float | None = None):
        api_key = api_key or os.getenv("GEMINI_API_KEY")
        # A missing key fails the first call, not construction.
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url or os.getenv("GEMINI_BASE_URL") or None
        ) if api_key else None
        self.temperature = temperature

    def generate(self, prompt: str, model: str) -> str:
        if self.client is None:
            raise MissingAPIKeyError("GEMINI_API_KEY is not set")

        kwargs = {}
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature

        logger.debug(f"Requesting completion from {model} ({len(prompt)} chars)")
        response = self.client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {"role": "user", "content": prompt},
            ],
            **kwargs,
        )

        text = self._extract_output_text(response)
        if text is None:
            raise EmptyResponseError(f"Model {model} returned no text")
        return text

    @staticmethod
    def _extract_output_text(response: object) -> str | None:
        choices = getattr(response, "choices", None)
        if not choices:
            return None

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if isinstance(content, str) and content:
            return content

        # Some compatible servers return content as a list of parts
        if isinstance(content, list):
            parts: list[str] = []
            for block in content:
                text = block.get("text") if isinstance(block, dict) else getattr(block, "text", None)
                if text:
                    parts.append(text)
            if parts:
                return "".join(parts)
        return None
