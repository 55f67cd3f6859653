"""Managed permissions collector.

Managed roles hold the permissions granted through resource permission
dialogs. Their permissions map directly onto user and team subjects without
writing an intermediate role, but only actions supported by the
authorization model are kept.
"""

import logging
from typing import Optional

from ....config.constants import MANAGED_ROLE_PREFIX, Relations, TupleTypes
from ....database.store import LegacyStore
from ...tuples.entities import TupleKey, TupleMap, new_tuple_entry
from ...tuples.services import add_to_tuple_map, translate_to_resource_tuple
from ..entities import ManagedPermissionRecord
from .base import BaseLegacyCollector


logger = logging.getLogger(__name__)


def permission_subject(record: ManagedPermissionRecord) -> Optional[str]:
    """Subject a managed permission is granted to.

    Returns None for roles only bound to an organization role, which have no
    subject until basic roles are part of the model.
    """
    if record.user_uid:
        return new_tuple_entry(TupleTypes.USER, record.user_uid)
    if record.team_uid:
        return new_tuple_entry(TupleTypes.TEAM, record.team_uid, Relations.MEMBER)
    return None


class ManagedPermissionsCollector(BaseLegacyCollector):
    """Collects managed role permissions of one kind."""

    def __init__(self, store: LegacyStore, kind: str, role_prefix: str = MANAGED_ROLE_PREFIX):
        super().__init__(store)
        self.kind = kind
        self.role_prefix = role_prefix
        self.name = f"managed_permissions:{kind}"

    def build_query(self) -> str:
        return f"""
            SELECT u.uid AS user_uid, t.uid AS team_uid, p.action, p.kind, p.identifier, r.org_id
            FROM permission p
            INNER JOIN role r ON p.role_id = r.id
            LEFT JOIN user_role ur ON r.id = ur.role_id
            LEFT JOIN {self.quote("user")} u ON u.id = ur.user_id
            LEFT JOIN team_role tr ON r.id = tr.role_id
            LEFT JOIN team t ON tr.team_id = t.id
            LEFT JOIN builtin_role br ON r.id = br.role_id
            WHERE r.name LIKE {self.param(1)}
            AND p.kind = {self.param(2)}
        """

    def build_tuple(self, record: ManagedPermissionRecord) -> Optional[TupleKey]:
        subject = permission_subject(record)
        if subject is None:
            # TODO: map organization role bindings once basic roles are modeled
            return None
        return translate_to_resource_tuple(subject, record.action, record.kind, record.identifier)

    async def collect(self, org_id: int) -> TupleMap:
        """Collect permission tuples keyed by object.

        Folder resource grants for the same subject, folder and relation are
        merged into one tuple carrying all granted resource groups.
        """
        rows = await self._fetch(self.build_query(), f"{self.role_prefix}%", self.kind)

        tuples: TupleMap = {}
        skipped = 0
        for row in rows:
            record = ManagedPermissionRecord.from_row(row)
            tuple_key = self.build_tuple(record)
            if tuple_key is None:
                skipped += 1
                logger.debug(
                    f"{self.name}: skipped unsupported permission {record.action} on {record.kind}:{record.identifier}"
                )
                continue
            add_to_tuple_map(tuples, tuple_key)

        logger.info(
            f"Collected {self.name} for org {org_id}: {len(rows)} rows, "
            f"{len(tuples)} objects, {skipped} skipped"
        )
        return tuples
