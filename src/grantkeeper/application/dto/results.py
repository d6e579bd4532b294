"""Structured results returned across the public permission boundary."""

from dataclasses import dataclass

from grantkeeper.domain.entities import PermissionGrant
from grantkeeper.domain.exceptions import EXCEPTIONS_BY_CODE, GrantKeeperError
from grantkeeper.domain.value_objects import ErrorCode


@dataclass(frozen=True)
class ErrorInfo:
    """Failure category and caller-safe message."""

    code: ErrorCode
    message: str

    @classmethod
    def from_exception(cls, exc: GrantKeeperError) -> "ErrorInfo":
        return cls(code=exc.code, message=str(exc))

    def to_exception(self) -> GrantKeeperError:
        return EXCEPTIONS_BY_CODE[self.code](self.message)


@dataclass(frozen=True)
class _Result:
    success: bool
    error: ErrorInfo | None

    def raise_for_error(self) -> None:
        """Raise the domain exception for a failed result."""
        if self.error is not None:
            raise self.error.to_exception()


@dataclass(frozen=True)
class GrantResult(_Result):
    """Outcome of grant_permission."""

    permission: PermissionGrant | None = None

    @classmethod
    def ok(cls, permission: PermissionGrant) -> "GrantResult":
        return cls(success=True, error=None, permission=permission)

    @classmethod
    def failed(cls, exc: GrantKeeperError) -> "GrantResult":
        return cls(success=False, error=ErrorInfo.from_exception(exc))

    def unwrap(self) -> PermissionGrant:
        self.raise_for_error()
        return self.permission


@dataclass(frozen=True)
class RevokeResult(_Result):
    """Outcome of revoke_permission."""

    removed: bool = False

    @classmethod
    def ok(cls, removed: bool) -> "RevokeResult":
        return cls(success=True, error=None, removed=removed)

    @classmethod
    def failed(cls, exc: GrantKeeperError) -> "RevokeResult":
        return cls(success=False, error=ErrorInfo.from_exception(exc))

    def unwrap(self) -> bool:
        self.raise_for_error()
        return self.removed


@dataclass(frozen=True)
class RevokeAllResult(_Result):
    """Outcome of revoke_all_permissions_for_object."""

    count: int = 0

    @classmethod
    def ok(cls, count: int) -> "RevokeAllResult":
        return cls(success=True, error=None, count=count)

    @classmethod
    def failed(cls, exc: GrantKeeperError) -> "RevokeAllResult":
        return cls(success=False, error=ErrorInfo.from_exception(exc))

    def unwrap(self) -> int:
        self.raise_for_error()
        return self.count
