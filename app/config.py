"""
Configuration settings for Bookstore Service
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings"""
    
    # Database
    DATABASE_URL: str = "sqlite:///./bookstore.db"
    
    # Service
    SERVICE_NAME: str = "bookstore-service"
    SERVICE_PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    
    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "https://book-app-frontend-tau.vercel.app"
    ]
    
    # Admin auth
    JWT_SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60
    
    # Server-Sent Events: frames buffered per open stream
    SSE_QUEUE_SIZE: int = 100
    
    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
