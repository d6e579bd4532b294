"""Object types that may carry permission grants."""

from enum import StrEnum

from grantkeeper.domain.exceptions import InvalidObjectType


class ObjectType(StrEnum):
    """Closed allow-list of entity kinds grants can reference."""

    NOTE = "note"
    TASK = "task"
    DATABASE = "database"
    DATABASE_ROW = "database_row"
    FOLDER = "folder"
    DATA_TEMPLATE = "data_template"

    @classmethod
    def parse(cls, value: object) -> "ObjectType":
        """Return the member for value or raise InvalidObjectType."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidObjectType(f"Invalid object_type: {value!r}")
