"""Constants and enums for neo-dualwrite.

Tuple types, relation names and legacy table values shared by the
collectors and the translation layer. Values must match the authorization
model deployed in the engine.
"""

from enum import IntEnum
from typing import Final


class TupleTypes:
    """Object and subject types of the authorization model."""

    USER: Final[str] = "user"
    TEAM: Final[str] = "team"
    FOLDER: Final[str] = "folder"
    RESOURCE: Final[str] = "resource"
    GROUP_RESOURCE: Final[str] = "group_resource"


class Relations:
    """Relation vocabulary of the authorization model."""

    TEAM_ADMIN: Final[str] = "team-admin"
    TEAM_MEMBER: Final[str] = "team-member"
    MEMBER: Final[str] = "member"
    PARENT: Final[str] = "parent"

    GET: Final[str] = "get"
    UPDATE: Final[str] = "update"
    CREATE: Final[str] = "create"
    DELETE: Final[str] = "delete"

    # Folder scoped grants on resources inside the folder
    FOLDER_RESOURCE_PREFIX: Final[str] = "resource_"
    FOLDER_RESOURCE_GET: Final[str] = "resource_get"
    FOLDER_RESOURCE_UPDATE: Final[str] = "resource_update"
    FOLDER_RESOURCE_CREATE: Final[str] = "resource_create"
    FOLDER_RESOURCE_DELETE: Final[str] = "resource_delete"


class Conditions:
    """Condition names and context keys."""

    GROUP_FILTER: Final[str] = "group_filter"
    GROUP_RESOURCES_KEY: Final[str] = "group_resources"


class PermissionKinds:
    """Legacy permission kinds the translation layer understands."""

    FOLDERS: Final[str] = "folders"
    DASHBOARDS: Final[str] = "dashboards"


class TeamPermission(IntEnum):
    """Legacy team_member.permission values."""

    MEMBER = 0
    ADMIN = 4


# Roles generated for resource permissions are named managed:<...>
MANAGED_ROLE_PREFIX: Final[str] = "managed:"

WILDCARD_IDENTIFIER: Final[str] = "*"
