"""
Admin sign-in endpoint
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.user_repository import UserRepository
from app.schemas.user import AdminLoginRequest, AdminLoginResponse
from app.services.user_service import InvalidCredentialsError, NotAdminError, UserService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency to get UserService instance"""
    return UserService(UserRepository(db))


@router.post("/admin", response_model=AdminLoginResponse, summary="Admin sign-in")
def admin_login(
    credentials: AdminLoginRequest,
    service: UserService = Depends(get_user_service)
):
    """
    Exchange admin credentials for a bearer token
    
    - **username**: Admin username
    - **password**: Admin password
    """
    try:
        return service.login_admin(credentials.username, credentials.password)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )
    except NotAdminError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required"
        )
