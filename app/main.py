"""
FastAPI Application Entry Point - Bookstore Service
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from app.config import settings
from app.database import init_db
from app.logging_config import setup_logging
from app.services.notification_hub import NotificationHub
from app.api import auth, books, orders, health

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: create tables and the notification hub. Shutdown: close open streams."""
    logger.info(f"Starting {settings.SERVICE_NAME}...")
    init_db()
    logger.info("Database initialized")
    app.state.hub = NotificationHub()
    logger.info(f"{settings.SERVICE_NAME} is running on port {settings.SERVICE_PORT}")
    yield
    logger.info(f"Shutting down {settings.SERVICE_NAME}...")
    app.state.hub.close()


# Create FastAPI application
app = FastAPI(
    title="Bookstore Service",
    description="Book catalog, orders and live order notifications",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(books.router)
app.include_router(orders.router)

# Prometheus metrics
Instrumentator().instrument(app).expose(app)
