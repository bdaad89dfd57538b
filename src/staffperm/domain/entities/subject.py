"""Subject entity - the principal whose access is evaluated."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    """Employee id plus the name of the one role it holds."""

    id: str
    role: str
