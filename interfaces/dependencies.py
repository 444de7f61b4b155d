"""FastAPI dependency injection integration with Lagom."""

from functools import lru_cache
from typing import Annotated

from fastapi import Header, HTTPException, status
from lagom import Container

from infrastructure.di.container import create_container


@lru_cache
def get_container() -> Container:
    """Get the DI container instance.

    Cached to ensure singleton behavior across requests.
    """
    return create_container()


def get_caller_id(x_user_id: Annotated[str | None, Header()] = None) -> str:
    """Return the authenticated caller id set by the upstream auth layer."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found in the request",
        )
    return x_user_id
