"""
User Repository - Data Access Layer
"""
from typing import Optional
from sqlalchemy.orm import Session

from app.models.user import User


class UserRepository:
    """Repository for User operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        return self.db.query(User).filter(User.username == username).first()
    
    def create(self, username: str, password_hash: str, role: str) -> User:
        """Create new user"""
        user = User(username=username, password_hash=password_hash, role=role)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
    
    def set_credentials(self, user: User, password_hash: str, role: str) -> User:
        """Replace a user's password hash and role"""
        user.password_hash = password_hash
        user.role = role
        self.db.commit()
        self.db.refresh(user)
        return user
