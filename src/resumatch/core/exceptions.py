from fastapi import HTTPException, status


class InvalidInputError(HTTPException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class UpstreamError(HTTPException):
    """The generation API failed or returned output that does not fit the schema."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )


class PayloadTooLargeError(HTTPException):
    def __init__(self, max_size_mb: int) -> None:
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Request body exceeds maximum of {max_size_mb}MB",
        )


class ExtractionError(Exception):
    """Raised when text extraction from a file fails."""
