"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from autorotate.core.security import decode_identity
from autorotate.db.session import get_db
from autorotate.services.errors import (
    EmptyCatalogError,
    EntityNotFoundError,
    NotAdministratorError,
    NotApprovedOrOwnerError,
    OutOfBoundsError,
    RotationError,
    ZeroDurationError,
)
from autorotate.services.gallery import Gallery, get_gallery
from autorotate.services.registry import EntityRegistry

# HTTP Bearer scheme for JWT authentication
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]

_ERROR_STATUS: dict[type[RotationError], int] = {
    OutOfBoundsError: status.HTTP_404_NOT_FOUND,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    EmptyCatalogError: status.HTTP_409_CONFLICT,
    ZeroDurationError: 422,
    NotAdministratorError: status.HTTP_403_FORBIDDEN,
    NotApprovedOrOwnerError: status.HTTP_403_FORBIDDEN,
}


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str:
    """Return the caller identity carried by the bearer token.

    Raises:
        HTTPException: If the token is missing or invalid
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_identity(credentials.credentials)
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from err


def get_gallery_dep(db: SessionDep) -> Gallery:
    """Get a gallery bound to the request's session."""
    return get_gallery(db)


def get_registry_dep(db: SessionDep) -> EntityRegistry:
    """Get the entity registry bound to the request's session."""
    return EntityRegistry(db)


def to_http_exception(err: RotationError) -> HTTPException:
    """Translate a service error into the matching HTTP error."""
    status_code = _ERROR_STATUS.get(type(err), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=err.message)


# Type aliases for common dependencies
CurrentIdentityDep = Annotated[str, Depends(get_current_identity)]
GalleryDep = Annotated[Gallery, Depends(get_gallery_dep)]
RegistryDep = Annotated[EntityRegistry, Depends(get_registry_dep)]
