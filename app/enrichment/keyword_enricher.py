"""Model-free enrichment used when no generative provider is configured."""

from typing import ClassVar

from app.enrichment.base import BaseEnricher
from app.logging.logger import Log
from app.processor.models import EnrichmentRequest, EnrichmentResult


class KeywordEnricher(BaseEnricher):
    """Summary = leading text, tags = known keywords found in the text."""

    SUMMARY_CHARS: ClassVar[int] = 200
    MAX_TAGS: ClassVar[int] = 10

    SKILLS: ClassVar[tuple[str, ...]] = (
        "javascript", "typescript", "python", "java", "c#", "c++", "ruby", "php",
        "react", "angular", "vue", "node.js", "express", "django", "flask",
        "aws", "azure", "gcp", "cloud", "docker", "kubernetes",
        "sql", "nosql", "mongodb", "postgresql", "mysql",
        "machine learning", "ai", "data science", "analytics",
        "agile", "scrum", "project management",
        "frontend", "backend", "fullstack", "devops", "security",
    )
    EDUCATION_LEVELS: ClassVar[tuple[str, ...]] = (
        "bachelor", "master", "phd", "doctorate", "mba",
    )
    IMMIGRATION_TERMS: ClassVar[tuple[str, ...]] = (
        "visa", "immigration", "petition", "recommendation", "reference",
        "extraordinary", "ability", "achievement", "award", "publication",
    )

    def enrich(self, request: EnrichmentRequest) -> EnrichmentResult:
        text = request.text
        summary = text[: self.SUMMARY_CHARS]
        if len(text) > self.SUMMARY_CHARS:
            summary += "..."
        tags = self._keyword_tags(text)
        Log.info(f"Keyword enrichment complete: {len(tags)} tags")
        return EnrichmentResult(summary=summary, tags=tags)

    def run_custom_instruction(self, text: str, instruction_template: str) -> str:
        _ = instruction_template
        Log.warning("No generative model configured; returning document text unchanged")
        return text

    def _keyword_tags(self, text: str) -> list[str]:
        lowered = text.lower()
        keywords = (*self.SKILLS, *self.EDUCATION_LEVELS, *self.IMMIGRATION_TERMS)
        return [keyword for keyword in keywords if keyword in lowered][: self.MAX_TAGS]
