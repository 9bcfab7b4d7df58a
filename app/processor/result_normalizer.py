from app.logging.logger import Log
from app.processor.exceptions import PipelineError
from app.processor.models import (
    CustomInstructionResult,
    DocumentKind,
    ExtractionOutcome,
    PipelineResult,
    StepName,
)
from app.processor.pipeline import PipelineContext

UNNAMED_DOCUMENT = "Unnamed Document"


def describe_failed_extraction(kind: DocumentKind, outcome: ExtractionOutcome) -> str:
    """Best-effort text used when the whole cascade failed."""
    reason = outcome.failure_message or "no extractor produced text"
    return f"Failed to extract text from {kind.value} document: {reason}"


class ResultNormalizer:
    """Builds the public result records from a finished or aborted context."""

    def success(self, context: PipelineContext) -> PipelineResult:
        if context.enrichment is None:
            raise ValueError("PipelineContext.enrichment must be set before normalization")
        chosen = context.extraction.chosen if context.extraction else None
        return PipelineResult(
            success=True,
            extracted_text=context.extracted_text,
            summary=context.enrichment.summary,
            tags=list(context.enrichment.tags),
            document_kind=context.document_kind,
            document_name=context.document_name or UNNAMED_DOCUMENT,
            extraction_strategy=chosen.attempt.strategy_id if chosen else None,
        )

    def failure(
        self,
        step: StepName,
        exc: Exception,
        context: PipelineContext,
    ) -> PipelineResult:
        _log_failure(f"Pipeline failed at step '{step.value}'", exc)
        return PipelineResult(
            success=False,
            extracted_text="",
            summary="",
            tags=[],
            document_kind=context.document_kind,
            document_name=context.document_name or UNNAMED_DOCUMENT,
            failure_step=step,
            error_message=str(exc) or type(exc).__name__,
        )

    def custom_success(self, context: PipelineContext) -> CustomInstructionResult:
        return CustomInstructionResult(
            success=True,
            text=context.custom_output,
            extracted_text=context.extracted_text,
            document_kind=context.document_kind,
        )

    def custom_failure(
        self,
        step: StepName,
        exc: Exception,
        context: PipelineContext,
    ) -> CustomInstructionResult:
        _log_failure(f"Custom instruction run failed at step '{step.value}'", exc)
        return CustomInstructionResult(
            success=False,
            text="",
            extracted_text="",
            document_kind=context.document_kind,
            failure_step=step,
            error_message=str(exc) or type(exc).__name__,
        )


def _log_failure(prefix: str, exc: Exception) -> None:
    if isinstance(exc, PipelineError):
        Log.error(f"{prefix} ({exc.kind.value}): {exc}")
    else:
        Log.exception(f"{prefix}: unexpected {type(exc).__name__}: {exc}", exc)
