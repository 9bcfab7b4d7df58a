from abc import ABC, abstractmethod


class BaseGenerativeModel(ABC):
    """Contract for provider-specific generative model clients."""

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """Run a single-turn completion and return the raw response text.

        Raises:
            GenerativeModelNetworkError: on network, auth or quota failures.
            GenerativeModelSafetyError: when the provider blocks the answer.
            GenerativeModelError: on any other failure.
        """
