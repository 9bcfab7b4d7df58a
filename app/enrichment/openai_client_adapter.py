import httpx
import openai

from app.enrichment.client_base import BaseGenerativeModel
from app.enrichment.exceptions import (
    GenerativeModelError,
    GenerativeModelNetworkError,
    GenerativeModelSafetyError,
)


class OpenAIModelAdapter(BaseGenerativeModel):
    """Generative model adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        temperature: float = 0.2,
        base_url: str | None = None,
        system_prompt: str = "You are an expert immigration document analyzer.",
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )
        self._model = model
        self._temperature = temperature
        self._system_prompt = system_prompt

    def complete(self, prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                messages=[
                    {"role": "system", "content": self._system_prompt},
                    {"role": "user", "content": prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerativeModelNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise GenerativeModelNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise GenerativeModelError("AI returned no choices")
        choice = response.choices[0]
        if choice.finish_reason == "content_filter":
            raise GenerativeModelSafetyError("SAFETY: response blocked by content filter")
        refusal = getattr(choice.message, "refusal", None)
        if isinstance(refusal, str) and refusal:
            raise GenerativeModelSafetyError(f"SAFETY: model refused to answer: {refusal}")
        content = choice.message.content
        if content is None:
            raise GenerativeModelError("AI returned empty response")
        return content
