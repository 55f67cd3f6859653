"""Translation of legacy resource permissions into relation tuples.

A managed permission is an (action, kind, identifier) row, for example
``("dashboards:read", "folders", "f1")``. Only actions with a counterpart in
the authorization model are translated, everything else is reported as
unsupported by returning ``None``.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from ....config.constants import (
    Conditions,
    PermissionKinds,
    Relations,
    TupleTypes,
    WILDCARD_IDENTIFIER,
)
from ..entities import TupleCondition, TupleKey, new_tuple_entry


DASHBOARD_GROUP = "dashboard.grafana.app"
DASHBOARD_RESOURCE = "dashboards"
FOLDER_GROUP = "folder.grafana.app"
FOLDER_RESOURCE = "folders"
ALERT_RULE_GROUP = "rules.alerting.grafana.app"
ALERT_RULE_RESOURCE = "alertrules"
LIBRARY_PANEL_GROUP = "librarypanel.grafana.app"
LIBRARY_PANEL_RESOURCE = "librarypanels"


@dataclass(frozen=True)
class ActionMapping:
    """Relation an action maps to, and the resource it applies to when granted on a folder."""

    relation: str
    group: str = ""
    resource: str = ""

    @property
    def is_folder_scoped(self) -> bool:
        return bool(self.group and self.resource)


@dataclass(frozen=True)
class ResourceTranslation:
    type: str
    group: str
    resource: str
    mapping: Dict[str, ActionMapping] = field(default_factory=dict)


RESOURCE_TRANSLATIONS: Dict[str, ResourceTranslation] = {
    PermissionKinds.DASHBOARDS: ResourceTranslation(
        type=TupleTypes.RESOURCE,
        group=DASHBOARD_GROUP,
        resource=DASHBOARD_RESOURCE,
        mapping={
            "dashboards:read": ActionMapping(Relations.GET),
            "dashboards:write": ActionMapping(Relations.UPDATE),
            "dashboards:delete": ActionMapping(Relations.DELETE),
        },
    ),
    PermissionKinds.FOLDERS: ResourceTranslation(
        type=TupleTypes.FOLDER,
        group=FOLDER_GROUP,
        resource=FOLDER_RESOURCE,
        mapping={
            "folders:read": ActionMapping(Relations.GET),
            "folders:write": ActionMapping(Relations.UPDATE),
            "folders:create": ActionMapping(Relations.CREATE),
            "folders:delete": ActionMapping(Relations.DELETE),
            "dashboards:read": ActionMapping(Relations.GET, DASHBOARD_GROUP, DASHBOARD_RESOURCE),
            "dashboards:write": ActionMapping(Relations.UPDATE, DASHBOARD_GROUP, DASHBOARD_RESOURCE),
            "dashboards:create": ActionMapping(Relations.CREATE, DASHBOARD_GROUP, DASHBOARD_RESOURCE),
            "dashboards:delete": ActionMapping(Relations.DELETE, DASHBOARD_GROUP, DASHBOARD_RESOURCE),
            "alert.rules:read": ActionMapping(Relations.GET, ALERT_RULE_GROUP, ALERT_RULE_RESOURCE),
            "alert.rules:write": ActionMapping(Relations.UPDATE, ALERT_RULE_GROUP, ALERT_RULE_RESOURCE),
            "alert.rules:create": ActionMapping(Relations.CREATE, ALERT_RULE_GROUP, ALERT_RULE_RESOURCE),
            "alert.rules:delete": ActionMapping(Relations.DELETE, ALERT_RULE_GROUP, ALERT_RULE_RESOURCE),
            "library.panels:read": ActionMapping(Relations.GET, LIBRARY_PANEL_GROUP, LIBRARY_PANEL_RESOURCE),
            "library.panels:write": ActionMapping(Relations.UPDATE, LIBRARY_PANEL_GROUP, LIBRARY_PANEL_RESOURCE),
            "library.panels:create": ActionMapping(Relations.CREATE, LIBRARY_PANEL_GROUP, LIBRARY_PANEL_RESOURCE),
            "library.panels:delete": ActionMapping(Relations.DELETE, LIBRARY_PANEL_GROUP, LIBRARY_PANEL_RESOURCE),
        },
    ),
}


def format_group_resource(group: str, resource: str) -> str:
    return f"{group}/{resource}"


def new_folder_tuple(subject: str, relation: str, folder_uid: str) -> TupleKey:
    return TupleKey(
        user=subject,
        relation=relation,
        object=new_tuple_entry(TupleTypes.FOLDER, folder_uid),
    )


def new_folder_resource_tuple(
    subject: str,
    relation: str,
    group: str,
    resource: str,
    folder_uid: str,
) -> TupleKey:
    """Grant ``relation`` on all ``group/resource`` objects inside a folder."""
    return TupleKey(
        user=subject,
        relation=Relations.FOLDER_RESOURCE_PREFIX + relation,
        object=new_tuple_entry(TupleTypes.FOLDER, folder_uid),
        condition=TupleCondition(
            Conditions.GROUP_FILTER,
            (format_group_resource(group, resource),),
        ),
    )


def new_resource_tuple(subject: str, relation: str, group: str, resource: str, name: str) -> TupleKey:
    return TupleKey(
        user=subject,
        relation=relation,
        object=new_tuple_entry(TupleTypes.RESOURCE, f"{group}/{resource}/{name}"),
    )


def new_group_resource_tuple(subject: str, relation: str, group: str, resource: str) -> TupleKey:
    return TupleKey(
        user=subject,
        relation=relation,
        object=new_tuple_entry(TupleTypes.GROUP_RESOURCE, format_group_resource(group, resource)),
    )


def translate_to_resource_tuple(
    subject: str,
    action: str,
    kind: str,
    identifier: str,
) -> Optional[TupleKey]:
    """Translate a legacy permission into a tuple.

    Returns:
        The tuple, or None when the action/kind/identifier combination has no
        representation in the authorization model.
    """
    translation = RESOURCE_TRANSLATIONS.get(kind)
    if translation is None:
        return None

    mapping = translation.mapping.get(action)
    if mapping is None or not identifier:
        return None

    if identifier == WILDCARD_IDENTIFIER:
        group = mapping.group if mapping.is_folder_scoped else translation.group
        resource = mapping.resource if mapping.is_folder_scoped else translation.resource
        return new_group_resource_tuple(subject, mapping.relation, group, resource)

    if translation.type == TupleTypes.FOLDER:
        if mapping.is_folder_scoped:
            return new_folder_resource_tuple(
                subject, mapping.relation, mapping.group, mapping.resource, identifier
            )
        return new_folder_tuple(subject, mapping.relation, identifier)

    return new_resource_tuple(
        subject, mapping.relation, translation.group, translation.resource, identifier
    )
