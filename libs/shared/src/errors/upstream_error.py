"""Upstream Error"""

from libs.shared.src.errors.domain_error import DomainError


class UpstreamError(DomainError):
    """Price source call failed (timeout, network, non-success status, bad payload)

    The message carries the failure reason but never the credentials.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, code="UPSTREAM_ERROR")
        self.status_code = status_code
