"""System actor sentinel."""

SYSTEM_ACTOR_ID = 0


def is_system_actor(user_id: object) -> bool:
    """True only for the integer sentinel, never for False or None."""
    return type(user_id) is int and user_id == SYSTEM_ACTOR_ID
