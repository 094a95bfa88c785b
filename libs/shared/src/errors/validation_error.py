"""Validation Error"""

from libs.shared.src.errors.domain_error import DomainError


class ValidationError(DomainError):
    """Malformed or missing request parameters (caller's fault, never retried)"""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
