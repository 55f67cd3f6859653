"""Team membership collector.

Every legacy team membership becomes a team-admin or team-member tuple
from the user to the team.
"""

import logging

from ....config.constants import Relations, TeamPermission, TupleTypes
from ...tuples.entities import TupleKey, TupleMap, new_tuple_entry
from ...tuples.services import add_to_tuple_map
from ..entities import TeamMembershipRecord
from .base import BaseLegacyCollector


logger = logging.getLogger(__name__)


def membership_relation(permission: int) -> str:
    """Admin permission is 4, anything else is a plain membership."""
    if permission == TeamPermission.ADMIN:
        return Relations.TEAM_ADMIN
    return Relations.TEAM_MEMBER


class TeamMembershipCollector(BaseLegacyCollector):
    """Collects team membership tuples."""

    name = "team_membership"

    def build_query(self) -> str:
        return f"""
            SELECT t.uid AS team_uid, u.uid AS user_uid, tm.permission
            FROM team_member tm
            INNER JOIN team t ON tm.team_id = t.id
            INNER JOIN {self.quote("user")} u ON tm.user_id = u.id
        """

    def build_tuple(self, record: TeamMembershipRecord) -> TupleKey:
        return TupleKey(
            user=new_tuple_entry(TupleTypes.USER, record.user_uid),
            relation=membership_relation(record.permission),
            object=new_tuple_entry(TupleTypes.TEAM, record.team_uid),
        )

    async def collect(self, org_id: int) -> TupleMap:
        """Collect membership tuples keyed by team."""
        rows = await self._fetch(self.build_query())

        tuples: TupleMap = {}
        for row in rows:
            record = TeamMembershipRecord.from_row(row)
            add_to_tuple_map(tuples, self.build_tuple(record))

        logger.info(f"Collected team memberships for org {org_id}: {len(rows)} rows, {len(tuples)} teams")
        return tuples
