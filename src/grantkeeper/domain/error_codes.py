"""Error codes for structured failure results."""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Failure categories surfaced by the permission subsystem."""

    INVALID_OBJECT_TYPE = "InvalidObjectType"
    INVALID_PERMISSION_LEVEL = "InvalidPermissionLevel"
    MISSING_ARGUMENT = "MissingArgument"
    OBJECT_NOT_FOUND = "ObjectNotFound"
    AUTHORIZATION_DENIED = "AuthorizationDenied"
    STORAGE_FAILURE = "StorageFailure"
