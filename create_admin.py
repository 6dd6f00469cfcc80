#!/usr/bin/env python
"""
Script to create an admin user, or reset an existing user's password

Usage: python create_admin.py [username] [password]
"""
import argparse
import logging

from app.database import SessionLocal, init_db
from app.logging_config import setup_logging
from app.repositories.user_repository import UserRepository
from app.services.user_service import UserService

logger = logging.getLogger("create_admin")


def create_admin(username: str, password: str) -> str:
    """Create or update the admin user; returns what was done"""
    init_db()
    db = SessionLocal()
    try:
        _, action = UserService(UserRepository(db)).create_or_update_admin(username, password)
    finally:
        db.close()
    logger.info(f"Admin user '{username}' {action}")
    return action


def main():
    parser = argparse.ArgumentParser(description="Create or update the admin user")
    parser.add_argument("username", nargs="?", default="admin")
    parser.add_argument("password", nargs="?", default="admin")
    args = parser.parse_args()
    create_admin(args.username, args.password)


if __name__ == "__main__":
    setup_logging()
    main()
