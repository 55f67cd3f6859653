"""Collectors feature for neo-dualwrite.

- entities/: typed legacy store records
- repositories/: legacy collectors reading the relational permission tables
- services/: authorization engine mirror collector and collector factories
"""

from .entities import TeamMembershipRecord, FolderRecord, ManagedPermissionRecord
from .repositories import (
    BaseLegacyCollector,
    TeamMembershipCollector,
    FolderTreeCollector,
    ManagedPermissionsCollector,
)
from .services import AuthzTupleCollector, create_legacy_collectors, create_authz_collector

__all__ = [
    "TeamMembershipRecord",
    "FolderRecord",
    "ManagedPermissionRecord",
    "BaseLegacyCollector",
    "TeamMembershipCollector",
    "FolderTreeCollector",
    "ManagedPermissionsCollector",
    "AuthzTupleCollector",
    "create_legacy_collectors",
    "create_authz_collector",
]
