import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .database import get_db
from .errors import UnauthorizedError
from .models import User
from .security_utils import verify_access_token

logger = logging.getLogger(__name__)

# auto_error=False so a missing header surfaces as our 401 envelope instead of a bare 403
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Identity resolved for the current request"""

    id: str
    email: str
    name: str


def resolve_user(db: Session, token: Optional[str]) -> CurrentUser:
    """Map request credentials to an identity or raise UnauthorizedError"""
    if not token:
        raise UnauthorizedError()

    payload = verify_access_token(token)
    if not payload or not payload.get("sub"):
        raise UnauthorizedError()

    user = db.query(User).filter(User.id == payload["sub"]).first()
    if not user:
        logger.warning(f"⚠️ Token subject {payload['sub']} no longer exists")
        raise UnauthorizedError()

    return CurrentUser(id=user.id, email=user.email, name=user.name)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> CurrentUser:
    """Get current user from the bearer token"""
    token = credentials.credentials if credentials else None
    current_user = resolve_user(db, token)
    logger.debug(f"✅ User authenticated: {current_user.email}")
    return current_user
