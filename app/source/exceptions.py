class ByteStoreError(Exception):
    """Raised when a byte store cannot return the requested document."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
