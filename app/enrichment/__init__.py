from app.enrichment.base import BaseEnricher
from app.enrichment.enricher import Enricher
from app.enrichment.factory import EnricherFactory
from app.enrichment.keyword_enricher import KeywordEnricher

__all__ = ["BaseEnricher", "Enricher", "EnricherFactory", "KeywordEnricher"]
