"""Folder tree collector.

Writes the folder hierarchy as ``parent`` tuples from each child folder to
its parent. Root folders have no parent tuple.
"""

import logging

from ....config.constants import Relations, TupleTypes
from ...tuples.entities import TupleKey, TupleMap, new_tuple_entry
from ...tuples.services import add_to_tuple_map
from ..entities import FolderRecord
from .base import BaseLegacyCollector


logger = logging.getLogger(__name__)


class FolderTreeCollector(BaseLegacyCollector):
    """Collects folder parent tuples."""

    name = "folder_tree"

    def build_query(self) -> str:
        return """
            SELECT uid, parent_uid, org_id FROM folder
        """

    def build_tuple(self, record: FolderRecord) -> TupleKey:
        return TupleKey(
            user=new_tuple_entry(TupleTypes.FOLDER, record.parent_uid),
            relation=Relations.PARENT,
            object=new_tuple_entry(TupleTypes.FOLDER, record.folder_uid),
        )

    async def collect(self, org_id: int) -> TupleMap:
        """Collect parent tuples keyed by child folder."""
        rows = await self._fetch(self.build_query())

        tuples: TupleMap = {}
        for row in rows:
            record = FolderRecord.from_row(row)
            if record.is_root:
                continue
            if not record.folder_uid:
                logger.debug(f"{self.name}: skipped folder row without uid under parent {record.parent_uid}")
                continue
            add_to_tuple_map(tuples, self.build_tuple(record))

        logger.info(f"Collected folder tree for org {org_id}: {len(tuples)} child folders")
        return tuples
