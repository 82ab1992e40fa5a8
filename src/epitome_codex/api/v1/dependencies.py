"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from epitome_codex.core.errors import (
    AuthenticationRequired,
    CodexError,
    Conflict,
    InvalidArgument,
    NotFound,
    PermissionDenied,
)
from epitome_codex.core.security import decode_access_token
from epitome_codex.db.session import get_db
from epitome_codex.models import User

# auto_error=False lets anonymous callers through to optional-auth routes.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]
CredentialsDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]

_STATUS_BY_ERROR: tuple[tuple[type[CodexError], int], ...] = (
    (AuthenticationRequired, status.HTTP_401_UNAUTHORIZED),
    (PermissionDenied, status.HTTP_403_FORBIDDEN),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (InvalidArgument, status.HTTP_400_BAD_REQUEST),
    (Conflict, status.HTTP_409_CONFLICT),
)


def http_error(err: CodexError) -> HTTPException:
    """Translate a domain error into the matching HTTP error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(err, error_type):
            return HTTPException(status_code=status_code, detail=str(err))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(err))


def _resolve_user(credentials: HTTPAuthorizationCredentials, db: Session) -> User:
    subject = decode_access_token(credentials.credentials)
    user = db.get(User, subject)
    if user is None:
        raise AuthenticationRequired("User not found")
    return user


def get_current_user(credentials: CredentialsDep, db: SessionDep) -> User:
    """Get the current authenticated user from the bearer token.

    Raises:
        HTTPException: 401 if the token is missing, invalid or names no user.
    """
    if credentials is None:
        raise http_error(AuthenticationRequired())
    try:
        return _resolve_user(credentials, db)
    except AuthenticationRequired as err:
        raise http_error(err) from err


def get_optional_user(credentials: CredentialsDep, db: SessionDep) -> User | None:
    """Return the caller if a valid token was sent, otherwise None."""
    if credentials is None:
        return None
    try:
        return _resolve_user(credentials, db)
    except AuthenticationRequired:
        return None


# Type aliases for user dependencies
CurrentUserDep = Annotated[User, Depends(get_current_user)]
OptionalUserDep = Annotated[User | None, Depends(get_optional_user)]


def get_admin_user(current_user: CurrentUserDep) -> User:
    """Require a signed-in admin.

    Raises:
        HTTPException: 403 if the caller is not an admin.
    """
    if not current_user.is_admin:
        raise http_error(PermissionDenied("Forbidden"))
    return current_user


AdminUserDep = Annotated[User, Depends(get_admin_user)]
