"""Unit tests for domain exceptions."""

import pytest

from staffperm.domain.exceptions import (
    InvalidPermission,
    NotFound,
    StaffPermError,
    Unauthorized,
    ValidationError,
)


@pytest.mark.parametrize("exc", [InvalidPermission, NotFound, Unauthorized, ValidationError])
def test_inherits_staffperm_error(exc) -> None:
    assert issubclass(exc, StaffPermError)


def test_invalid_permission_lists_identifiers_sorted_and_unique() -> None:
    err = InvalidPermission(["NOPE", "ALSO_NOPE", "NOPE"])
    assert err.identifiers == ["ALSO_NOPE", "NOPE"]
    assert "ALSO_NOPE, NOPE" in str(err)


def test_not_found_carries_entity_and_key() -> None:
    """NotFound can be caught as StaffPermError and keeps what was missing."""
    with pytest.raises(StaffPermError, match="Role not found: Ghost") as info:
        raise NotFound("Role", "Ghost")
    assert info.value.entity == "Role"
    assert info.value.key == "Ghost"


def test_exception_message_preserved() -> None:
    msg = "Caller does not hold MANAGE_SETTINGS"
    with pytest.raises(Unauthorized, match=msg):
        raise Unauthorized(msg)
