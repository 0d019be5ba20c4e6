import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..auth import CurrentUser, get_current_user
from ..database import get_db
from ..errors import UnauthorizedError, ValidationError
from ..models import User
from ..schemas import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from ..security_utils import create_access_token, hash_password, verify_password
from ..shared.responses import success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

INVALID_CREDENTIALS = "Invalid email or password"


def issue_token(user: User) -> TokenResponse:
    token = create_access_token(user.id, {"email": user.email, "name": user.name})
    return TokenResponse(access_token=token, user=UserResponse.model_validate(user))


@router.post("/register")
async def register(data: RegisterRequest, db: Session = Depends(get_db)):
    """Create a technician / company account"""
    if db.query(User).filter(User.email == data.email).first():
        raise ValidationError.for_field("email", "Email is already registered")

    user = User(email=data.email, password_hash=hash_password(data.password), name=data.name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Same email registered concurrently between the check and the insert
        db.rollback()
        raise ValidationError.for_field("email", "Email is already registered") from e
    db.refresh(user)

    logger.info(f"🆕 User registered: {user.email}")
    return success_response(UserResponse.model_validate(user), status_code=201)


@router.post("/login")
async def login(data: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token"""
    email = data.email.strip().lower()
    user = db.query(User).filter(User.email == email).first()

    if not user or not verify_password(data.password, user.password_hash):
        logger.warning(f"⚠️ Failed login attempt for {email}")
        raise UnauthorizedError(INVALID_CREDENTIALS)

    logger.info(f"✅ User logged in: {user.email}")
    return success_response(issue_token(user))


@router.get("/me")
async def me(current_user: CurrentUser = Depends(get_current_user)):
    return success_response(
        UserResponse(id=current_user.id, email=current_user.email, name=current_user.name)
    )
