"""
User Service - admin accounts and sign-in
"""
import logging
from typing import Tuple

from app.auth import create_access_token, hash_password, verify_password
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import AdminLoginResponse, UserInfo

logger = logging.getLogger(__name__)


class InvalidCredentialsError(Exception):
    """Unknown username or wrong password"""
    pass


class NotAdminError(Exception):
    """Credentials are valid but the user is not an admin"""
    pass


class UserService:
    """Service layer for admin users"""
    
    def __init__(self, repository: UserRepository):
        self.repository = repository
    
    def login_admin(self, username: str, password: str) -> AdminLoginResponse:
        """
        Check admin credentials and issue a token
        
        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
            NotAdminError: If the user exists but is not an admin
        """
        user = self.repository.get_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed admin sign-in for {username}")
            raise InvalidCredentialsError()
        if user.role != "admin":
            logger.warning(f"Non-admin user {username} tried to sign in as admin")
            raise NotAdminError()
        
        token = create_access_token(user.username, role=user.role)
        return AdminLoginResponse(token=token, user=UserInfo(username=user.username, role=user.role))
    
    def create_or_update_admin(self, username: str, password: str) -> Tuple[User, str]:
        """
        Make sure an admin with these credentials exists
        
        An existing user keeps its row; its password is replaced and it is
        promoted to admin.
        
        Returns:
            The user and what happened: "created", "updated" or "promoted"
        """
        password_hash = hash_password(password)
        user = self.repository.get_by_username(username)
        if not user:
            return self.repository.create(username, password_hash, "admin"), "created"
        
        action = "updated" if user.role == "admin" else "promoted"
        return self.repository.set_credentials(user, password_hash, "admin"), action
