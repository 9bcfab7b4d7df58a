from abc import ABC, abstractmethod

from app.processor.models import EnrichmentRequest, EnrichmentResult


class BaseEnricher(ABC):
    """Contract for all enrichment adapters."""

    @abstractmethod
    def enrich(self, request: EnrichmentRequest) -> EnrichmentResult:
        """Produce a summary and tag list for already-capped document text.

        Never raises: model failures and malformed responses are recovered
        into sentinel results.
        """

    @abstractmethod
    def run_custom_instruction(self, text: str, instruction_template: str) -> str:
        """Run a caller-supplied instruction over *text* and return cleaned output.

        Never raises.
        """
