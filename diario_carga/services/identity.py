"""Mapping of a request's session or email to a canonical user id.

The front end may run statelessly (sending the email on every call) or rely
on the session cookie. Both paths end here, so the stores only ever receive
an integer user id.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from ..models import User


def resolve(session: Session, session_identity: Optional[int], email: Optional[str]) -> Optional[int]:
    """Return the user id for this request, or ``None`` when nothing resolves.

    A session identity wins over any email. An unknown email is not an error;
    readers turn ``None`` into an empty result, writers into ``NotFoundError``.
    """
    if session_identity is not None:
        return session_identity
    if not email:
        return None
    return session.query(User.id).filter_by(email=email).scalar()
