"""Deduplication and merge rules for collected tuples.

Folder scoped resource grants that differ only in their resource groups are
stored under a key that ignores the condition, so a second grant for the same
subject, folder and relation lands on the first one instead of next to it.
"""

import logging

from ....config.constants import Conditions, Relations, TupleTypes
from ..entities import ObjectTupleMap, TupleCondition, TupleKey, TupleMap


logger = logging.getLogger(__name__)


def is_folder_resource_tuple(tuple_key: TupleKey) -> bool:
    """Check if tuple grants access to resources inside a folder."""
    return (
        tuple_key.object_type == TupleTypes.FOLDER
        and tuple_key.relation.startswith(Relations.FOLDER_RESOURCE_PREFIX)
    )


def tuple_key_without_condition(tuple_key: TupleKey) -> str:
    """Canonical key of a tuple with its condition ignored."""
    return tuple_key.without_condition().to_string()


def tuple_map_key(tuple_key: TupleKey) -> str:
    """Key a tuple is stored under inside an object's tuple map."""
    if is_folder_resource_tuple(tuple_key):
        return tuple_key_without_condition(tuple_key)
    return tuple_key.to_string()


def merge_folder_resource_tuples(target: TupleKey, source: TupleKey) -> TupleKey:
    """Return ``target`` granting the resource groups of both tuples."""
    if target.condition is None and source.condition is None:
        return target

    base = target.condition or TupleCondition(Conditions.GROUP_FILTER)
    return target.with_condition(base.union(source.condition))


def add_tuple(bucket: ObjectTupleMap, tuple_key: TupleKey, merge: bool = True) -> str:
    """Store a tuple in an object's tuple map and return the key used.

    With ``merge`` disabled a folder resource tuple replaces any earlier tuple
    sharing its condition-less key.
    """
    key = tuple_map_key(tuple_key)
    existing = bucket.get(key)

    if merge and existing is not None and is_folder_resource_tuple(tuple_key):
        bucket[key] = merge_folder_resource_tuples(existing, tuple_key)
        logger.debug(f"Merged folder resource grant into {bucket[key]}")
    else:
        bucket[key] = tuple_key

    return key


def add_to_tuple_map(tuples: TupleMap, tuple_key: TupleKey, merge: bool = True) -> str:
    """Store a tuple in a collection result, keyed by its object."""
    bucket = tuples.setdefault(tuple_key.object, {})
    return add_tuple(bucket, tuple_key, merge=merge)
