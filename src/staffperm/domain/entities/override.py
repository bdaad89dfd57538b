"""Override entity - subject-scoped permission set replacing role defaults."""

from dataclasses import dataclass
from datetime import datetime

from staffperm.domain.value_objects import Permission


@dataclass(frozen=True)
class Override:
    """Custom permission set for one subject. An empty set grants nothing."""

    subject_id: str
    permissions: frozenset[Permission]
    updated_at: datetime | None = None
    updated_by: str | None = None
