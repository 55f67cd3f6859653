"""Legacy tuple collectors.

Each collector reads the legacy tables through a LegacyStore and returns
tuples keyed by object, then by canonical tuple key.
"""

from .base import BaseLegacyCollector
from .team_membership_collector import TeamMembershipCollector, membership_relation
from .folder_tree_collector import FolderTreeCollector
from .managed_permissions_collector import ManagedPermissionsCollector, permission_subject

__all__ = [
    "BaseLegacyCollector",
    "TeamMembershipCollector",
    "membership_relation",
    "FolderTreeCollector",
    "ManagedPermissionsCollector",
    "permission_subject",
]
