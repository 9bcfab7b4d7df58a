class GenerativeModelError(Exception):
    """Raised when the generative model call fails."""


class GenerativeModelNetworkError(GenerativeModelError):
    """Raised when the model provider call fails due to network/infrastructure issues."""


class GenerativeModelSafetyError(GenerativeModelError):
    """Raised when the model provider refuses to answer for safety reasons."""


class EnrichmentError(Exception):
    """Raised when enrichment cannot be configured (e.g. missing prompt template)."""
