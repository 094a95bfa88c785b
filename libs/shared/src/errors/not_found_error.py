"""Not Found Error"""

from libs.shared.src.errors.domain_error import DomainError


class NotFoundError(DomainError):
    """Well-formed query with no data available"""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="NOT_FOUND")
