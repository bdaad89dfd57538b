"""Auth middleware - resolves the acting subject for each request."""

import falcon.asgi

from staffperm.application.ports import SubjectDirectory


class AuthMiddleware:
    """Sets req.context.subject to the acting Subject, or None.

    The principal id comes from a Keycloak bearer token, or from the
    X-Subject-Id header when ``trust_subject_header`` is enabled. The role is
    looked up in the subject directory. Anything unresolved leaves the
    subject as None, which the resolver treats as holding no permissions.
    """

    def __init__(
        self,
        subjects: SubjectDirectory,
        keycloak_provider=None,
        trust_subject_header: bool = False,
    ) -> None:
        self._subjects = subjects
        self._keycloak = keycloak_provider
        self._trust_subject_header = trust_subject_header

    def _principal_id(self, req: falcon.asgi.Request) -> str | None:
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer ") and self._keycloak:
            user = self._keycloak.decode_token(auth[7:])
            return user.user_id if user else None
        if self._trust_subject_header:
            return req.get_header("X-Subject-Id")
        return None

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        principal_id = self._principal_id(req)
        req.context.subject = self._subjects.get(principal_id) if principal_id else None
