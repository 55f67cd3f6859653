"""Tuple entities package."""

from .tuple_key import TupleKey, TupleCondition, new_tuple_entry, parse_tuple_entry
from .protocols import TupleMap, ObjectTupleMap, LegacyTupleCollector

__all__ = [
    "TupleKey",
    "TupleCondition",
    "new_tuple_entry",
    "parse_tuple_entry",
    "TupleMap",
    "ObjectTupleMap",
    "LegacyTupleCollector",
]
