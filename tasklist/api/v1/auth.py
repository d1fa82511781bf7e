from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session, select

from tasklist.api.v1.deps import get_current_user
from tasklist.core.config import settings
from tasklist.core.exceptions import AuthenticationRequired, ValidationFailed
from tasklist.core.limiter import limiter
from tasklist.core.logging import logger
from tasklist.models.user import User
from tasklist.schemas.auth import AuthResponse, SignOutResponse, UserCreate, UserLogin, UserRead
from tasklist.services.database_service import get_session
from tasklist.utils.auth import create_access_token

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        user=UserRead.model_validate(user, from_attributes=True),
        token=create_access_token(str(user.id)),
    )


@router.post("/sign-up", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def sign_up(request: Request, user_data: UserCreate, session: Session = Depends(get_session)):
    """Register a new user and sign them in."""
    email = user_data.email.strip().lower()
    name = (user_data.name or "").strip() or None

    if session.exec(select(User).where(User.email == email)).first():
        raise ValidationFailed("Email already registered")

    user = User(
        email=email,
        name=name,
        hashed_password=User.hash_password(user_data.password.get_secret_value()),
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("user_registered", user_id=user.id)
    return _auth_response(user)


@router.post("/sign-in", response_model=AuthResponse)
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def sign_in(request: Request, credentials: UserLogin, session: Session = Depends(get_session)):
    """Exchange email and password for an access token."""
    email = credentials.email.strip().lower()
    user = session.exec(select(User).where(User.email == email)).first()
    if user is None or not user.verify_password(credentials.password.get_secret_value()):
        logger.warning("sign_in_failed", user_id=user.id if user else None)
        raise AuthenticationRequired("Invalid email or password")

    logger.info("user_signed_in", user_id=user.id)
    return _auth_response(user)


@router.get("/session", response_model=UserRead)
async def get_session_user(user: User = Depends(get_current_user)):
    """The user behind the current bearer token."""
    return UserRead.model_validate(user, from_attributes=True)


@router.post("/sign-out", response_model=SignOutResponse)
async def sign_out(user: User = Depends(get_current_user)):
    # Tokens are stateless; the client drops its copy
    logger.info("user_signed_out", user_id=user.id)
    return SignOutResponse()
