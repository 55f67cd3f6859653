"""Authorization engine mirror collector.

Reads the tuples currently stored for an object so they can be compared
with what the legacy collectors produce.
"""

import logging
from typing import List, Optional, Sequence

from ....core.exceptions import AuthzError, AuthzPaginationError
from ....integrations.authz.protocols import AuthzClient, ReadRequest
from ...tuples.entities import ObjectTupleMap, TupleKey
from ...tuples.services import add_tuple


logger = logging.getLogger(__name__)


DEFAULT_MAX_PAGES = 1000


class AuthzTupleCollector:
    """Collects stored tuples for a set of relations on one object."""

    def __init__(
        self,
        relations: Sequence[str],
        namespace: Optional[str] = None,
        page_size: Optional[int] = None,
        max_pages: int = DEFAULT_MAX_PAGES
    ):
        if max_pages < 1:
            raise ValueError(f"max_pages must be >= 1, got {max_pages}")
        self.relations = list(relations)
        self.namespace = namespace
        self.page_size = page_size
        self.max_pages = max_pages

    async def list_tuples(
        self,
        client: AuthzClient,
        object: str,
        namespace: str,
        relation: str
    ) -> List[TupleKey]:
        """Read every page stored for ``object#relation``.

        Each follow-up read passes the continuation token of the previous
        page. Reading stops once a page returns an empty token.

        Raises:
            AuthzPaginationError: If the token stops advancing or max_pages is exceeded
        """
        request = ReadRequest(
            namespace=namespace,
            object=object,
            relation=relation,
            page_size=self.page_size,
        )
        response = await client.read(request)
        tuples = [stored.key for stored in response.tuples]
        pages = 1

        token = response.continuation_token
        while token:
            if pages >= self.max_pages:
                raise AuthzPaginationError(object, relation, pages, "page limit reached")

            response = await client.read(request.next_page(token))
            pages += 1
            tuples.extend(stored.key for stored in response.tuples)

            if response.continuation_token == token:
                raise AuthzPaginationError(object, relation, pages, "continuation token did not advance")
            token = response.continuation_token

        logger.debug(f"Read {len(tuples)} tuples for {object}#{relation} in {pages} pages")
        return tuples

    async def collect(
        self,
        client: AuthzClient,
        object: str,
        namespace: Optional[str] = None
    ) -> ObjectTupleMap:
        """Collect stored tuples for all relations into one map keyed by canonical key.

        Folder resource tuples are keyed without their condition; the last one
        read for a key wins. The namespace defaults to the one the collector
        was built with.
        """
        namespace = namespace or self.namespace
        if not namespace:
            raise ValueError(f"No namespace given for reading stored tuples of {object}")

        out: ObjectTupleMap = {}
        for relation in self.relations:
            try:
                tuples = await self.list_tuples(client, object, namespace, relation)
            except AuthzError as e:
                logger.error(f"Collecting stored tuples for {object} failed: {e}")
                raise

            for tuple_key in tuples:
                add_tuple(out, tuple_key, merge=False)

        logger.info(f"Collected {len(out)} stored tuples for {object} in namespace {namespace}")
        return out
