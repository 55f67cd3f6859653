"""Collector entities package."""

from .records import TeamMembershipRecord, FolderRecord, ManagedPermissionRecord

__all__ = [
    "TeamMembershipRecord",
    "FolderRecord",
    "ManagedPermissionRecord",
]
