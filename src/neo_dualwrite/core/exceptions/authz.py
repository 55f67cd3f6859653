"""Authorization engine exceptions for neo-dualwrite."""

from typing import Optional

from .base import DualWriteError


class AuthzError(DualWriteError):
    """Base class for authorization engine errors."""
    pass


class AuthzReadError(AuthzError):
    """Raised when a read request to the authorization engine fails."""

    def __init__(
        self,
        object: str,
        relation: str,
        reason: str,
        status_code: Optional[int] = None
    ):
        self.object = object
        self.relation = relation
        self.reason = reason
        self.status_code = status_code
        message = f"Read of {object}#{relation} failed"
        if status_code is not None:
            message += f" with status {status_code}"
        super().__init__(
            f"{message}: {reason}",
            details={
                "object": object,
                "relation": relation,
                "status_code": status_code,
            },
        )


class AuthzResponseError(AuthzError):
    """Raised when the authorization engine returns a malformed payload."""
    pass


class AuthzPaginationError(AuthzError):
    """Raised when a paginated read does not terminate."""

    def __init__(self, object: str, relation: str, pages: int, reason: str):
        self.object = object
        self.relation = relation
        self.pages = pages
        super().__init__(
            f"Pagination of {object}#{relation} aborted after {pages} pages: {reason}",
            details={"object": object, "relation": relation, "pages": pages},
        )
