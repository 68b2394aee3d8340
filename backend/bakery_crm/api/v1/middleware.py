"""
API middleware for authentication.
Centralized session check for all protected routes.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.db.session import get_db
from bakery_crm.schemas.user import CurrentUser
from bakery_crm.services.auth_service import AuthService

# auto_error is off so a missing header is a 401 like a bad token
security = HTTPBearer(auto_error=False)


async def require_authentication(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """
    Centralized authentication dependency.
    
    Usage:
        @router.get("/endpoint")
        async def my_endpoint(
            current_user: CurrentUser = Depends(require_authentication)
        ):
            ...
    
    Returns:
        The user owning the session token
        
    Raises:
        HTTPException: If the header is missing or the token has no session
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    current_user = await AuthService(db).get_current_user(credentials.credentials)
    if not current_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    return current_user
