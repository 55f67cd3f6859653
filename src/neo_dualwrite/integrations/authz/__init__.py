"""Authorization engine integration."""

from .protocols import AuthzClient, ReadRequest, ReadResponse, StoredTuple
from .client import HttpAuthzClient

__all__ = [
    "AuthzClient",
    "ReadRequest",
    "ReadResponse",
    "StoredTuple",
    "HttpAuthzClient",
]
