"""Argument checks shared by the mutating use cases."""

from grantkeeper.domain.exceptions import MissingArgument


def require(**arguments: object) -> None:
    """Raise MissingArgument for the first argument that is None."""
    for name, value in arguments.items():
        if value is None:
            raise MissingArgument(f"{name} is required")
