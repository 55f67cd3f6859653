"""Tuples feature for neo-dualwrite.

- entities/: tuple model and collector protocol
- services/: merge rules and legacy permission translation
"""

from .entities import (
    TupleKey,
    TupleCondition,
    new_tuple_entry,
    parse_tuple_entry,
    TupleMap,
    ObjectTupleMap,
    LegacyTupleCollector,
)
from .services import (
    is_folder_resource_tuple,
    tuple_key_without_condition,
    merge_folder_resource_tuples,
    add_tuple,
    add_to_tuple_map,
    translate_to_resource_tuple,
)

__all__ = [
    "TupleKey",
    "TupleCondition",
    "new_tuple_entry",
    "parse_tuple_entry",
    "TupleMap",
    "ObjectTupleMap",
    "LegacyTupleCollector",
    "is_folder_resource_tuple",
    "tuple_key_without_condition",
    "merge_folder_resource_tuples",
    "add_tuple",
    "add_to_tuple_map",
    "translate_to_resource_tuple",
]
