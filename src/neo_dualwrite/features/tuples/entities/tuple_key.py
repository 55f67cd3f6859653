"""Relation tuple domain entities.

A tuple grants ``relation`` on ``object`` to ``user`` (the subject), optionally
narrowed by a condition. Subjects and objects are tuple entries of the form
``type:id`` or ``type:id#relation``.

The string form ``object#relation@user[,condition]`` is the canonical key used
to deduplicate tuples inside a collection result.
"""

import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ....core.exceptions import TupleFormatError


_CONDITION_PATTERN = re.compile(r"^(?P<name>[^(),]+)\((?P<groups>[^()]*)\)$")


def new_tuple_entry(type_: str, id_: str, relation: str = "") -> str:
    """Build a tuple entry ``type:id`` with an optional ``#relation`` suffix."""
    if not type_ or not id_:
        raise TupleFormatError(f"{type_}:{id_}", "type and id must be non-empty")
    entry = f"{type_}:{id_}"
    if relation:
        entry += f"#{relation}"
    return entry


def parse_tuple_entry(entry: str) -> Tuple[str, str, str]:
    """Split a tuple entry into (type, id, relation)."""
    type_, sep, rest = entry.partition(":")
    if not sep or not type_ or not rest:
        raise TupleFormatError(entry, "expected type:id[#relation]")
    id_, _, relation = rest.partition("#")
    if not id_:
        raise TupleFormatError(entry, "id must be non-empty")
    return type_, id_, relation


@dataclass(frozen=True)
class TupleCondition:
    """Condition restricting a folder scoped grant to a set of resource groups.

    ``group_resources`` is stored sorted and de-duplicated so that two
    conditions granting the same groups have the same string form.
    """

    name: str
    group_resources: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "group_resources", tuple(sorted(set(self.group_resources))))

    def union(self, other: Optional["TupleCondition"]) -> "TupleCondition":
        """Return a condition granting the groups of both conditions."""
        if other is None:
            return self
        return TupleCondition(self.name, self.group_resources + other.group_resources)

    def __str__(self) -> str:
        return f"{self.name}({','.join(self.group_resources)})"

    @classmethod
    def parse(cls, value: str) -> "TupleCondition":
        """Parse ``name(g1,g2)``."""
        match = _CONDITION_PATTERN.match(value)
        if not match:
            raise TupleFormatError(value, "expected condition name(group,...)")
        groups = match.group("groups")
        return cls(
            name=match.group("name"),
            group_resources=tuple(g for g in groups.split(",") if g),
        )


@dataclass(frozen=True)
class TupleKey:
    """Immutable relation tuple."""

    user: str
    relation: str
    object: str
    condition: Optional[TupleCondition] = None

    def __post_init__(self):
        if not self.relation:
            raise TupleFormatError(str(self), "relation must be non-empty")

    @property
    def subject(self) -> str:
        """Alias for ``user``, the subject the relation is granted to."""
        return self.user

    @property
    def object_type(self) -> str:
        return self.object.partition(":")[0]

    def without_condition(self) -> "TupleKey":
        """Return the same grant with the condition removed."""
        if self.condition is None:
            return self
        return replace(self, condition=None)

    def with_condition(self, condition: Optional[TupleCondition]) -> "TupleKey":
        return replace(self, condition=condition)

    def to_string(self) -> str:
        value = f"{self.object}#{self.relation}@{self.user}"
        if self.condition is not None:
            value += f",{self.condition}"
        return value

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def parse(cls, value: str) -> "TupleKey":
        """Decode a tuple from its canonical string form."""
        tuple_part, sep, condition_part = value.partition(",")
        condition = TupleCondition.parse(condition_part) if sep else None

        object_and_relation, sep, user = tuple_part.partition("@")
        if not sep or not user:
            raise TupleFormatError(value, "expected object#relation@user")
        obj, sep, relation = object_and_relation.rpartition("#")
        if not sep or not obj:
            raise TupleFormatError(value, "expected object#relation@user")

        parse_tuple_entry(obj)
        parse_tuple_entry(user)
        return cls(user=user, relation=relation, object=obj, condition=condition)
