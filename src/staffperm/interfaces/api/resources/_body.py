"""Request body helpers shared by resources."""

import falcon.asgi

from staffperm.domain.exceptions import ValidationError


async def read_permission_list(req: falcon.asgi.Request) -> list[str]:
    """Read {"permissions": [...]} and return the raw identifiers."""
    body = await req.get_media()
    if not isinstance(body, dict) or "permissions" not in body:
        raise ValidationError("Missing required field: 'permissions'")
    permissions = body["permissions"]
    if not isinstance(permissions, list) or not all(isinstance(p, str) for p in permissions):
        raise ValidationError("'permissions' must be a list of strings")
    return permissions


async def read_string_field(req: falcon.asgi.Request, field: str) -> str:
    """Read a required non-empty string field from a JSON object body."""
    body = await req.get_media()
    value = body.get(field) if isinstance(body, dict) else None
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Missing required field: '{field}'")
    return value
