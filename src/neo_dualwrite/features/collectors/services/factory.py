"""Factories for the default collector set."""

from typing import Dict, List, Optional, Sequence, Tuple

from ....config.constants import PermissionKinds, Relations, TupleTypes
from ....config.settings import DualWriteSettings, get_settings
from ....database.store import LegacyStore
from ...tuples.entities import LegacyTupleCollector
from ..repositories import FolderTreeCollector, ManagedPermissionsCollector, TeamMembershipCollector
from .authz_collector import AuthzTupleCollector


DEFAULT_KINDS: Tuple[str, ...] = (PermissionKinds.FOLDERS, PermissionKinds.DASHBOARDS)

# Relations the legacy collectors can write, per object type
OBJECT_TYPE_RELATIONS: Dict[str, Tuple[str, ...]] = {
    TupleTypes.TEAM: (Relations.TEAM_ADMIN, Relations.TEAM_MEMBER),
    TupleTypes.FOLDER: (
        Relations.PARENT,
        Relations.GET,
        Relations.UPDATE,
        Relations.CREATE,
        Relations.DELETE,
        Relations.FOLDER_RESOURCE_GET,
        Relations.FOLDER_RESOURCE_UPDATE,
        Relations.FOLDER_RESOURCE_CREATE,
        Relations.FOLDER_RESOURCE_DELETE,
    ),
    TupleTypes.RESOURCE: (Relations.GET, Relations.UPDATE, Relations.DELETE),
    TupleTypes.GROUP_RESOURCE: (Relations.GET, Relations.UPDATE, Relations.CREATE, Relations.DELETE),
}


def create_legacy_collectors(
    store: LegacyStore,
    kinds: Sequence[str] = DEFAULT_KINDS,
    role_prefix: Optional[str] = None,
    settings: Optional[DualWriteSettings] = None
) -> List[LegacyTupleCollector]:
    """Build the legacy collectors in the order they should run.

    The managed role prefix defaults to ``settings.managed_role_prefix``,
    read from the environment when no settings are given.
    """
    if role_prefix is None:
        role_prefix = (settings or get_settings()).managed_role_prefix

    collectors: List[LegacyTupleCollector] = [
        TeamMembershipCollector(store),
        FolderTreeCollector(store),
    ]
    collectors.extend(
        ManagedPermissionsCollector(store, kind, role_prefix=role_prefix) for kind in kinds
    )
    return collectors


def create_authz_collector(
    object_type: str,
    settings: Optional[DualWriteSettings] = None
) -> AuthzTupleCollector:
    """Build a mirror collector reading every relation written for ``object_type``."""
    try:
        relations = OBJECT_TYPE_RELATIONS[object_type]
    except KeyError:
        raise ValueError(f"No relations known for object type '{object_type}'") from None

    settings = settings or get_settings()
    return AuthzTupleCollector(
        relations,
        namespace=settings.authz_namespace,
        page_size=settings.authz_page_size,
        max_pages=settings.authz_max_pages,
    )
