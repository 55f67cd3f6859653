"""Neo-DualWrite - relation tuple collectors for the dual-write authorization migration.

Legacy collectors translate the relational permission tables into relation
tuples; the mirror collector reads what the authorization engine currently
stores. Both return tuple maps keyed identically so they can be diffed.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__
from .config import (
    DualWriteSettings,
    get_settings,
    TupleTypes,
    Relations,
    Conditions,
    PermissionKinds,
    TeamPermission,
)
from .core.exceptions import (
    DualWriteError,
    TupleFormatError,
    DatabaseError,
    DatabaseConfigurationError,
    LegacyQueryError,
    AuthzError,
    AuthzReadError,
    AuthzResponseError,
    AuthzPaginationError,
)
from .database import SQLDialect, LegacyStore, AsyncPGLegacyStore, get_dialect
from .features.tuples import (
    TupleKey,
    TupleCondition,
    TupleMap,
    ObjectTupleMap,
    LegacyTupleCollector,
    new_tuple_entry,
    parse_tuple_entry,
    is_folder_resource_tuple,
    tuple_key_without_condition,
    merge_folder_resource_tuples,
    translate_to_resource_tuple,
)
from .features.collectors import (
    TeamMembershipCollector,
    FolderTreeCollector,
    ManagedPermissionsCollector,
    AuthzTupleCollector,
    create_legacy_collectors,
    create_authz_collector,
)
from .integrations.authz import (
    AuthzClient,
    HttpAuthzClient,
    ReadRequest,
    ReadResponse,
    StoredTuple,
)

__all__ = [
    "__version__",
    # Configuration
    "DualWriteSettings",
    "get_settings",
    "TupleTypes",
    "Relations",
    "Conditions",
    "PermissionKinds",
    "TeamPermission",
    # Exceptions
    "DualWriteError",
    "TupleFormatError",
    "DatabaseError",
    "DatabaseConfigurationError",
    "LegacyQueryError",
    "AuthzError",
    "AuthzReadError",
    "AuthzResponseError",
    "AuthzPaginationError",
    # Legacy store
    "SQLDialect",
    "LegacyStore",
    "AsyncPGLegacyStore",
    "get_dialect",
    # Tuples
    "TupleKey",
    "TupleCondition",
    "TupleMap",
    "ObjectTupleMap",
    "LegacyTupleCollector",
    "new_tuple_entry",
    "parse_tuple_entry",
    "is_folder_resource_tuple",
    "tuple_key_without_condition",
    "merge_folder_resource_tuples",
    "translate_to_resource_tuple",
    # Collectors
    "TeamMembershipCollector",
    "FolderTreeCollector",
    "ManagedPermissionsCollector",
    "AuthzTupleCollector",
    "create_legacy_collectors",
    "create_authz_collector",
    # Authorization engine
    "AuthzClient",
    "HttpAuthzClient",
    "ReadRequest",
    "ReadResponse",
    "StoredTuple",
]
