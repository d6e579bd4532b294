"""Data transfer objects."""

from grantkeeper.application.dto.results import (
    ErrorInfo,
    GrantResult,
    RevokeAllResult,
    RevokeResult,
)

__all__ = [
    "ErrorInfo",
    "GrantResult",
    "RevokeAllResult",
    "RevokeResult",
]
