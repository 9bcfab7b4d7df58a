import pytest

from app.processor.models import (
    CustomInstructionResult,
    DocumentKind,
    EnrichmentRequest,
    PipelineResult,
    ResolvedSource,
    StepName,
    StrategyId,
)


def _result(**overrides: object) -> PipelineResult:
    fields: dict[str, object] = {
        "success": True,
        "extracted_text": "text",
        "summary": "S",
        "tags": ["a"],
        "document_kind": DocumentKind.PDF,
        "document_name": "cv.pdf",
        "extraction_strategy": StrategyId.DOCUMENT_UNDERSTANDING_SERVICE,
    }
    fields.update(overrides)
    return PipelineResult(**fields)  # type: ignore[arg-type]


class TestPipelineResult:
    def test_success_without_failure_step(self) -> None:
        assert _result().success

    def test_success_with_failure_step_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="failure_step"):
            _result(failure_step=StepName.ENRICH)

    def test_failure_requires_failure_step(self) -> None:
        with pytest.raises(ValueError, match="failure_step"):
            _result(success=False)

    def test_to_dict_uses_enum_values(self) -> None:
        payload = _result().to_dict()
        assert payload["document_kind"] == "pdf"
        assert payload["extraction_strategy"] == "document-understanding-service"
        assert payload["failure_step"] is None
        assert payload["tags"] == ["a"]


class TestCustomInstructionResult:
    def test_failure_to_dict(self) -> None:
        result = CustomInstructionResult(
            success=False,
            text="",
            extracted_text="",
            document_kind=DocumentKind.UNKNOWN,
            failure_step=StepName.DOWNLOAD,
            error_message="boom",
        )
        payload = result.to_dict()
        assert payload["failure_step"] == "download"
        assert payload["document_kind"] == "unknown"

    def test_success_with_failure_step_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            CustomInstructionResult(
                success=True,
                text="t",
                extracted_text="t",
                document_kind=DocumentKind.HTML,
                failure_step=StepName.ENRICH,
            )


class TestEnrichmentRequest:
    def test_build_caps_text(self) -> None:
        request = EnrichmentRequest.build("abcdef", DocumentKind.PLAIN_TEXT, "n", 4)
        assert request.text == "abcd"
        assert request.document_name == "n"

    def test_build_keeps_short_text(self) -> None:
        request = EnrichmentRequest.build("abc", DocumentKind.PLAIN_TEXT, None, 4)
        assert request.text == "abc"


def test_resolved_source_content_length() -> None:
    assert ResolvedSource(data=b"12345").content_length == 5
