from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import DuplicateEntryError, InvalidCredentialsError
from ..models import User
from ..security import PasswordHasher

logger = logging.getLogger(__name__)


def find_user_by_email(session: Session, email: str) -> Optional[User]:
    return session.query(User).filter_by(email=email).one_or_none()


def register(session: Session, hasher: PasswordHasher, name: str, email: str, secret: str) -> int:
    """Create a user; a second registration with the same email never overwrites."""
    if find_user_by_email(session, email) is not None:
        raise DuplicateEntryError()

    user = User(name=name, email=email, credential_digest=hasher.hash(secret))
    session.add(user)
    try:
        session.flush()
    except IntegrityError as exc:
        # lost a concurrent registration race on uq_users_email
        session.rollback()
        raise DuplicateEntryError() from exc
    logger.info("Registered user %s", user.id)
    return user.id


def authenticate(session: Session, hasher: PasswordHasher, email: str, secret: str) -> User:
    user = find_user_by_email(session, email)
    if user is None or not hasher.verify(secret, user.credential_digest):
        raise InvalidCredentialsError()
    return user
