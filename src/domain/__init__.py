"""Domain layer: constants, errors and schemas."""

from .errors import ErrorCodes, InitAbortError
from .schemas import (
    Action,
    InitRunLog,
    InstallCommand,
    LegacyUserInfo,
    PackageManager,
    SessionState,
    TemplateDescriptor,
    UserSessionProfile,
)

__all__ = [
    "InitAbortError",
    "ErrorCodes",
    "Action",
    "InitRunLog",
    "InstallCommand",
    "LegacyUserInfo",
    "PackageManager",
    "SessionState",
    "TemplateDescriptor",
    "UserSessionProfile",
]
