"""Custom exception hierarchy."""

from __future__ import annotations


class SyncError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(SyncError):
    """Network failure or non-2xx response from the backend."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class LogicalError(SyncError):
    """Backend answered but reported ``success=false``."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class FormatError(LogicalError):
    """Response envelope or pagination metadata is malformed."""

    def __init__(
        self,
        message: str = "Invalid response format from server",
        code: str | None = "INVALID_RESPONSE",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, code=code, status_code=status_code)


class PaginationMismatchError(FormatError):
    """A later page disagreed with the totals reported by page 1."""

    def __init__(
        self,
        message: str,
        page: int,
        expected: tuple[int, int],
        actual: tuple[int, int],
    ) -> None:
        super().__init__(message, code="PAGINATION_MISMATCH")
        self.page = page
        self.expected = expected
        self.actual = actual


class RefreshError(SyncError):
    """One or more cache loaders failed while refetching."""

    def __init__(self, message: str, failed_keys: list[str] | None = None) -> None:
        super().__init__(message)
        self.failed_keys = failed_keys or []
