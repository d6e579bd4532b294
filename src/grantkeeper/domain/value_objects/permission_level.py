"""Permission levels, totally ordered read < write < admin."""

from enum import StrEnum

from grantkeeper.domain.exceptions import InvalidPermissionLevel


class PermissionLevel(StrEnum):
    """Access level held by a grant or required by an operation."""

    READ = "read"
    WRITE = "write"
    ADMIN = "admin"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def satisfies(self, required: "PermissionLevel") -> bool:
        """A grant at this level covers every required level at or below it."""
        return self.rank >= required.rank

    @classmethod
    def parse(cls, value: object) -> "PermissionLevel":
        """Return the member for value or raise InvalidPermissionLevel."""
        level = cls.try_parse(value)
        if level is None:
            raise InvalidPermissionLevel(f"Invalid permission_level: {value!r}")
        return level

    @classmethod
    def try_parse(cls, value: object) -> "PermissionLevel | None":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        return None


_RANKS = {
    PermissionLevel.READ: 1,
    PermissionLevel.WRITE: 2,
    PermissionLevel.ADMIN: 3,
}
