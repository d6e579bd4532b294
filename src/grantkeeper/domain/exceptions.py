"""Domain exceptions."""

from grantkeeper.domain.error_codes import ErrorCode


class GrantKeeperError(Exception):
    """Base exception for grantkeeper."""

    code: ErrorCode


class InvalidObjectType(GrantKeeperError):
    """object_type is not in the allow-list."""

    code = ErrorCode.INVALID_OBJECT_TYPE


class InvalidPermissionLevel(GrantKeeperError):
    """permission_level is not one of read, write, admin."""

    code = ErrorCode.INVALID_PERMISSION_LEVEL


class MissingArgument(GrantKeeperError):
    """A required identifier was not supplied."""

    code = ErrorCode.MISSING_ARGUMENT


class ObjectNotFound(GrantKeeperError):
    """Ownership could not be resolved for the object."""

    code = ErrorCode.OBJECT_NOT_FOUND


class AuthorizationDenied(GrantKeeperError):
    """Actor lacks owner, admin or system rights on the object."""

    code = ErrorCode.AUTHORIZATION_DENIED


class StorageFailure(GrantKeeperError):
    """Underlying persistence operation failed.

    The message is always generic; the original error is chained as
    ``__cause__`` and logged where it was caught.
    """

    code = ErrorCode.STORAGE_FAILURE


EXCEPTIONS_BY_CODE: dict[ErrorCode, type[GrantKeeperError]] = {
    exc.code: exc
    for exc in (
        InvalidObjectType,
        InvalidPermissionLevel,
        MissingArgument,
        ObjectNotFound,
        AuthorizationDenied,
        StorageFailure,
    )
}
