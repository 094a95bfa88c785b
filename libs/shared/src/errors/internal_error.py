"""Internal Error"""

from libs.shared.src.errors.domain_error import DomainError


class InternalError(DomainError):
    """Unexpected computation fault"""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INTERNAL_ERROR")
