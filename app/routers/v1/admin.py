"""Admin-only probe for checking a bearer token end to end.

    no header                            -> 401
    Authorization: Bearer user-token     -> 403
    Authorization: Bearer admin-token    -> 200
"""

from fastapi import APIRouter, Depends

from app.core.security import require_admin
from app.domain.auth import AuthenticatedUser

router = APIRouter(tags=["Admin"])


@router.get("/admin-check")
async def admin_check(user: AuthenticatedUser = Depends(require_admin)) -> dict:
    return {"ok": True}
