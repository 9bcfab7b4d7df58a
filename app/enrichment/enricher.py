"""AI-powered document summarizer and tagger."""

from pathlib import Path

from app.enrichment.base import BaseEnricher
from app.enrichment.client_base import BaseGenerativeModel
from app.enrichment.exceptions import GenerativeModelSafetyError
from app.enrichment.parsers import FAILED_SUMMARY, clean_markdown, parse_response
from app.enrichment.prompt_loader import load_prompt_template
from app.logging.logger import Log
from app.processor.models import EnrichmentRequest, EnrichmentResult, ErrorKind

SAFETY_BLOCKED_SUMMARY = "Content generation blocked due to safety settings"
PROCESSING_FAILED_TAGS = ("error", "processing_failed")
SAFETY_BLOCKED_TAGS = ("error", "safety_blocked")
TEXT_PLACEHOLDER = "{extracted_text}"


def is_safety_block(exc: Exception) -> bool:
    return isinstance(exc, GenerativeModelSafetyError) or "SAFETY" in str(exc).upper()


class Enricher(BaseEnricher):
    """Summarizes and tags document text using a generative model."""

    def __init__(
        self,
        *,
        model: BaseGenerativeModel,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._model = model
        self._prompt_template = load_prompt_template(prompt_template_path)

    def enrich(self, request: EnrichmentRequest) -> EnrichmentResult:
        prompt = self._build_prompt(request)
        Log.debug(f"Enrichment prompt:\n{prompt}")

        try:
            raw_response = self._model.complete(prompt).strip()
        except Exception as exc:
            return self._failed_result(exc)
        Log.debug(f"AI raw response:\n{raw_response}")

        result, recovered = parse_response(raw_response)
        if not recovered:
            Log.warning(
                f"Enrichment response violated the output contract "
                f"({ErrorKind.MODEL_CONTRACT_VIOLATION.value}); using defaults"
            )
        Log.info(f"Enrichment complete: {len(result.tags)} tags")
        return result

    def run_custom_instruction(self, text: str, instruction_template: str) -> str:
        prompt = self._fill_template(instruction_template, text)
        Log.debug(f"Custom instruction prompt:\n{prompt}")
        try:
            raw_response = self._model.complete(prompt).strip()
        except Exception as exc:
            if is_safety_block(exc):
                Log.warning(f"Custom instruction blocked by safety settings: {exc}")
                return SAFETY_BLOCKED_SUMMARY
            Log.warning(f"Custom instruction failed: {exc}")
            return f"Failed to process with custom prompt: {exc}"
        Log.debug(f"AI raw response:\n{raw_response}")
        return clean_markdown(raw_response)

    def _build_prompt(self, request: EnrichmentRequest) -> str:
        return self._prompt_template.format(
            document_kind=request.document_kind.value,
            document_name=request.document_name or "Unnamed document",
            document_text=request.text,
        )

    @staticmethod
    def _fill_template(template: str, text: str) -> str:
        if TEXT_PLACEHOLDER in template:
            return template.replace(TEXT_PLACEHOLDER, text)
        return f"{template.rstrip()}\n\n{text}"

    @staticmethod
    def _failed_result(exc: Exception) -> EnrichmentResult:
        if is_safety_block(exc):
            Log.warning(f"Enrichment blocked by safety settings: {exc}")
            return EnrichmentResult(
                summary=SAFETY_BLOCKED_SUMMARY,
                tags=list(SAFETY_BLOCKED_TAGS),
            )
        Log.warning(f"Enrichment model call failed: {exc}")
        return EnrichmentResult(summary=FAILED_SUMMARY, tags=list(PROCESSING_FAILED_TAGS))
