#!/usr/bin/env python3
"""
Create (or reset) the local test user.
Usage: python create_test_user.py [email] [password] [name]
"""
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from torqr.database import Base, SessionLocal, engine
from torqr.models import User
from torqr.security_utils import hash_password

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)

DEFAULT_EMAIL = "test@torqr.app"
DEFAULT_PASSWORD = "Test123!"
DEFAULT_NAME = "Test User"


def create_test_user(email: str, password: str, name: str) -> None:
    Base.metadata.create_all(bind=engine, checkfirst=True)
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email).first()
        if user:
            logger.info(f"⚠️  Test user already exists with email: {email}")
            logger.info("Updating password...")
            user.password_hash = hash_password(password)
            db.commit()
            logger.info("✅ Password updated successfully!")
        else:
            user = User(email=email, password_hash=hash_password(password), name=name)
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info("✅ Test user created successfully!")
            logger.info(f"User ID: {user.id}")

        logger.info("\n📋 Login Credentials:")
        logger.info(f"Email:    {email}")
        logger.info(f"Password: {password}\n")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    args = sys.argv[1:]
    try:
        create_test_user(
            args[0].strip().lower() if len(args) > 0 else DEFAULT_EMAIL,
            args[1] if len(args) > 1 else DEFAULT_PASSWORD,
            args[2] if len(args) > 2 else DEFAULT_NAME,
        )
    except Exception as e:
        logger.error(f"❌ Error creating test user: {e}")
        sys.exit(1)
