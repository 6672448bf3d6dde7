from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import List, Optional
from uuid import UUID
import logging

from app.core.auth.service import AuthService
from app.core.auth.schemas import CurrentPrincipal, Roles

logger = logging.getLogger(__name__)

security = HTTPBearer()

class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "Not enough permissions"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )

def _as_list(value) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return [str(v).strip() for v in value if v and str(v).strip()]

async def get_current_principal(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> CurrentPrincipal:
    """Resolve the caller from the bearer token"""

    payload = AuthService.verify_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError("Invalid or expired token")

    user_id = payload.get("sub") or payload.get("user_id")
    if not user_id:
        raise AuthenticationError("Token payload has no subject")

    roles = _as_list(payload.get("roles", payload.get("role")))

    try:
        branch_ids = [UUID(b) for b in _as_list(payload.get("branch_ids"))]
        primary = payload.get("primary_branch_id")
        primary_branch_id = UUID(primary) if primary else None
    except ValueError:
        raise AuthenticationError("Token carries a malformed branch id")

    return CurrentPrincipal(
        user_id=str(user_id),
        roles=roles,
        branch_ids=branch_ids,
        primary_branch_id=primary_branch_id or (branch_ids[0] if branch_ids else None)
    )

def require_roles(allowed_roles: List[str]):
    """Factory for a dependency that requires one of the given roles"""
    def role_checker(principal: CurrentPrincipal = Depends(get_current_principal)) -> CurrentPrincipal:
        if not principal.has_any_role(allowed_roles):
            logger.warning(f"⛔ User {principal.user_id} with roles {principal.roles} denied; needs one of {allowed_roles}")
            raise AuthorizationError(
                f"Roles {principal.roles} not authorized. Allowed roles: {allowed_roles}"
            )
        return principal
    return role_checker

def can_access_branch(principal: CurrentPrincipal, branch_id: Optional[UUID]) -> bool:
    """ADMIN sees every branch; everyone else only their own"""
    if principal.has_role(Roles.ADMIN):
        return True
    return branch_id is not None and branch_id in principal.branch_ids

def verify_branch_access(principal: CurrentPrincipal, branch_id: UUID) -> CurrentPrincipal:
    if not can_access_branch(principal, branch_id):
        raise AuthorizationError(f"No access to branch {branch_id}")
    return principal
