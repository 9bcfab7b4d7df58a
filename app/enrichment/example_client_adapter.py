"""Example generative model adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerativeModel and register the provider in EnricherFactory.
"""

import json
from typing import ClassVar

from app.enrichment.client_base import BaseGenerativeModel


class ExampleModelAdapter(BaseGenerativeModel):
    """Example adapter that returns a fixed valid enrichment JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "Example summary of the document.",
        "tags": ["example", "document", "unreviewed"],
    }

    def complete(self, prompt: str) -> str:
        _ = prompt
        return json.dumps(self.DEFAULT_RESPONSE)
