from app.processor.models import ErrorKind


class PipelineError(Exception):
    """Base exception for failures that end a pipeline run."""

    kind: ErrorKind = ErrorKind.UNREACHABLE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedInputError(PipelineError):
    """Raised when a document reference cannot be parsed."""

    kind = ErrorKind.MALFORMED_INPUT


class UnreachableError(PipelineError):
    """Raised when document bytes cannot be fetched."""

    kind = ErrorKind.UNREACHABLE

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnsupportedKindError(PipelineError):
    """Raised when a DocumentKind has no extraction cascade."""

    kind = ErrorKind.UNSUPPORTED_KIND
