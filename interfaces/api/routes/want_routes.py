from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from lagom import Container

from application.dtos.want_dtos import (
    CreateWantRequest,
    NewWant,
    UpdateWantRequest,
    WantChanges,
    WantImageUpload,
    WantResponse,
)
from application.queries.want_queries import GetWantByIdQuery
from application.use_cases.want_use_cases import CreateWantUseCase, UpdateWantUseCase
from interfaces.api.middleware import handle_use_case_errors
from interfaces.dependencies import get_caller_id, get_container

logger = structlog.get_logger()

router = APIRouter(prefix="/wants", tags=["wants"])


async def _get_want_for_admin(container: Container, want_id: str, caller_id: str) -> WantResponse:
    want = await container[GetWantByIdQuery].execute(want_id)
    if want is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Want {want_id} not found",
        )
    if caller_id not in want.admins:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"User {caller_id} cannot update the Want {want_id}",
        )
    return want


@router.post("", status_code=status.HTTP_201_CREATED)
@handle_use_case_errors
async def create_want(
    body: NewWant,
    caller_id: Annotated[str, Depends(get_caller_id)],
    container: Annotated[Container, Depends(get_container)],
) -> WantResponse:
    """Create a new Want owned by the caller.

    Returns:
        201 Created: Want successfully created
        400 Bad Request: Validation error
        404 Not Found: Caller is not a known user

    """
    logger.info("create_want_endpoint_called", caller_id=caller_id)
    use_case = container[CreateWantUseCase]
    return await use_case.execute(CreateWantRequest(creator=caller_id, **body.model_dump()))


@router.get("/{want_id}", status_code=status.HTTP_200_OK)
async def get_want(
    want_id: str,
    container: Annotated[Container, Depends(get_container)],
) -> WantResponse:
    """Retrieve a Want by ID."""
    want = await container[GetWantByIdQuery].execute(want_id)
    if want is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Want not found",
        )
    return want


@router.patch("/{want_id}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def update_want(
    want_id: str,
    changes: WantChanges,
    caller_id: Annotated[str, Depends(get_caller_id)],
    container: Annotated[Container, Depends(get_container)],
) -> WantResponse:
    """Apply a partial update; omitted fields are left untouched."""
    await _get_want_for_admin(container, want_id, caller_id)
    use_case = container[UpdateWantUseCase]
    return await use_case.execute(
        want_id=want_id,
        request=UpdateWantRequest(**changes.model_dump(exclude_none=True)),
    )


@router.post("/{want_id}/upload-image", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def upload_want_image(
    want_id: str,
    file: Annotated[UploadFile, File()],
    caller_id: Annotated[str, Depends(get_caller_id)],
    container: Annotated[Container, Depends(get_container)],
) -> WantResponse:
    """Attach an image to a Want. The file type is detected from its content."""
    logger.info("upload_want_image_endpoint_called", want_id=want_id, caller_id=caller_id)
    await _get_want_for_admin(container, want_id, caller_id)

    data = await file.read()
    use_case = container[UpdateWantUseCase]
    return await use_case.execute(
        want_id=want_id,
        request=UpdateWantRequest(
            image=WantImageUpload(data=data, declared_mime_type=file.content_type),
        ),
    )
