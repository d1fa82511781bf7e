from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from tasklist.core.exceptions import AuthenticationRequired, NotAuthorized, NotFound
from tasklist.core.logging import logger
from tasklist.models.user import User
from tasklist.services.assistant import TaskAssistant
from tasklist.services.database_service import get_session
from tasklist.utils.auth import verify_token

# auto_error=False so a missing header turns into our own 401 message
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> User:
    """Resolve the authenticated user from the bearer token."""
    if credentials is None:
        raise AuthenticationRequired()

    subject = verify_token(credentials.credentials)
    if subject is None or not subject.isdigit():
        raise AuthenticationRequired()

    user = session.get(User, int(subject))
    if user is None:
        logger.warning("token_for_unknown_user", user_id=subject)
        raise AuthenticationRequired()
    return user


def get_assistant(request: Request) -> TaskAssistant:
    """The assistant built during application startup."""
    return request.app.state.assistant


def ensure_owner(entity, user: User, entity_name: str, action: str):
    """
    Check that `entity` exists and belongs to `user`.

    Raises:
        NotFound: if the entity does not exist
        NotAuthorized: if another user owns it
    """
    if entity is None:
        raise NotFound(f"{entity_name.capitalize()} not found")
    if entity.user_id != user.id:
        logger.warning(
            "ownership_check_failed",
            entity=entity_name,
            entity_id=entity.id,
            user_id=user.id,
            action=action,
        )
        raise NotAuthorized(f"Not authorized to {action} this {entity_name}")
    return entity
