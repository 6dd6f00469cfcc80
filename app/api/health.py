"""
Health check endpoint
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from sqlalchemy import text
from datetime import datetime, timezone

from app.database import get_db
from app.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(request: Request, db: Session = Depends(get_db)):
    """
    Health check endpoint
    
    Returns service health status including:
    - Database connectivity
    - Number of open order event streams
    """
    # Check database connection
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"
    
    return {
        "service": settings.SERVICE_NAME,
        "status": "healthy" if db_status == "healthy" else "unhealthy",
        "database": db_status,
        "sse_subscribers": request.app.state.hub.subscriber_count(),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/")
def root():
    """Root endpoint"""
    return {
        "service": settings.SERVICE_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }
