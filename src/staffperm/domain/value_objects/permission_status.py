"""Display status of one permission for one subject."""

from enum import StrEnum


class PermissionStatus(StrEnum):
    """Whether a permission is granted, and whether it comes from the role or an override."""

    DEFAULT_ON = "default-on"
    DEFAULT_OFF = "default-off"
    CUSTOM_ON = "custom-on"
    CUSTOM_OFF = "custom-off"
