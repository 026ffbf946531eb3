"""Bearer-token authentication and role guards as FastAPI dependencies.

The caller's identity is returned from the dependency and passed to the
handler as a parameter:

    Authorization: Bearer admin-token  -> admin
    Authorization: Bearer user-token   -> user
"""

from __future__ import annotations

from fastapi import Depends, Header, Request

from app.core.config import settings
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.domain.auth import AuthenticatedUser, UserRole


def resolve_token(token: str, tokens: dict[str, str]) -> AuthenticatedUser | None:
    role = tokens.get(token)
    if role is None:
        return None
    try:
        return AuthenticatedUser(role=UserRole(role))
    except ValueError:
        return None


def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> AuthenticatedUser:
    """Authenticate the request or raise 401."""
    if not authorization:
        raise UnauthorizedError("Missing Auth header")

    # Only the first two space-separated segments count
    scheme, token = (authorization.split(" ") + [""])[:2]
    if scheme != "Bearer" or not token:
        raise UnauthorizedError("Invalid Auth header format")

    tokens = getattr(request.app.state, "settings", settings).auth_tokens
    user = resolve_token(token, tokens)
    if user is None:
        raise UnauthorizedError("Invalid token")
    return user


def require_admin(user: AuthenticatedUser = Depends(get_current_user)) -> AuthenticatedUser:
    """Allow only admins through; authenticated non-admins get 403."""
    if not user.is_admin:
        raise ForbiddenError("Not allowed")
    return user
