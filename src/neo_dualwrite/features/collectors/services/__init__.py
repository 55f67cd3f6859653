"""Collector services package."""

from .authz_collector import AuthzTupleCollector
from .factory import (
    DEFAULT_KINDS,
    OBJECT_TYPE_RELATIONS,
    create_legacy_collectors,
    create_authz_collector,
)

__all__ = [
    "AuthzTupleCollector",
    "DEFAULT_KINDS",
    "OBJECT_TYPE_RELATIONS",
    "create_legacy_collectors",
    "create_authz_collector",
]
