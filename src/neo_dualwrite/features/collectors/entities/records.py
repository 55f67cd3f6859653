"""Typed legacy store records.

One record type per collector query, built from a row mapping (an
``asyncpg.Record`` or a plain dict). NULL columns from outer joins become
empty strings so callers can test presence with truthiness.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _text(row: Mapping[str, Any], column: str) -> str:
    value = row[column]
    return "" if value is None else str(value)


def _optional_int(row: Mapping[str, Any], column: str) -> Optional[int]:
    value = row[column]
    return None if value is None else int(value)


@dataclass(frozen=True)
class TeamMembershipRecord:
    team_uid: str
    user_uid: str
    permission: int

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TeamMembershipRecord":
        return cls(
            team_uid=_text(row, "team_uid"),
            user_uid=_text(row, "user_uid"),
            permission=_optional_int(row, "permission") or 0,
        )


@dataclass(frozen=True)
class FolderRecord:
    org_id: Optional[int]
    folder_uid: str
    parent_uid: str

    @property
    def is_root(self) -> bool:
        return not self.parent_uid

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "FolderRecord":
        return cls(
            org_id=_optional_int(row, "org_id"),
            folder_uid=_text(row, "uid"),
            parent_uid=_text(row, "parent_uid"),
        )


@dataclass(frozen=True)
class ManagedPermissionRecord:
    """Permission of a managed role with its direct user or team binding.

    Both uids are empty when the role is only bound to an organization role.
    """

    org_id: Optional[int]
    action: str
    kind: str
    identifier: str
    user_uid: str = ""
    team_uid: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ManagedPermissionRecord":
        return cls(
            org_id=_optional_int(row, "org_id"),
            action=_text(row, "action"),
            kind=_text(row, "kind"),
            identifier=_text(row, "identifier"),
            user_uid=_text(row, "user_uid"),
            team_uid=_text(row, "team_uid"),
        )
