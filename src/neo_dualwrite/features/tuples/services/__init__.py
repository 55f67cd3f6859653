"""Tuple services package.

Merge rules and legacy permission translation.
"""

from .merge import (
    is_folder_resource_tuple,
    tuple_key_without_condition,
    tuple_map_key,
    merge_folder_resource_tuples,
    add_tuple,
    add_to_tuple_map,
)
from .translation import (
    RESOURCE_TRANSLATIONS,
    translate_to_resource_tuple,
    new_folder_tuple,
    new_folder_resource_tuple,
    new_resource_tuple,
    new_group_resource_tuple,
)

__all__ = [
    "is_folder_resource_tuple",
    "tuple_key_without_condition",
    "tuple_map_key",
    "merge_folder_resource_tuples",
    "add_tuple",
    "add_to_tuple_map",
    "RESOURCE_TRANSLATIONS",
    "translate_to_resource_tuple",
    "new_folder_tuple",
    "new_folder_resource_tuple",
    "new_resource_tuple",
    "new_group_resource_tuple",
]
