"""Configuration, logging and constants for neo-dualwrite."""

from .constants import (
    TupleTypes,
    Relations,
    Conditions,
    PermissionKinds,
    TeamPermission,
    MANAGED_ROLE_PREFIX,
    WILDCARD_IDENTIFIER,
)
from .settings import DualWriteSettings, get_settings
from .logging_config import LoggingConfig, setup_logging

__all__ = [
    "TupleTypes",
    "Relations",
    "Conditions",
    "PermissionKinds",
    "TeamPermission",
    "MANAGED_ROLE_PREFIX",
    "WILDCARD_IDENTIFIER",
    "DualWriteSettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",
]
