from collections.abc import Callable
from datetime import UTC, datetime

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.want_dtos import CreateWantRequest, UpdateWantRequest, WantResponse
from application.mappers.want_mappers import WantMapper
from application.ports.repositories.want_repository import WantRepository
from application.ports.user_resolver import UserResolver
from application.use_cases.want_image_use_cases import AttachWantImageUseCase
from domain.aggregates.want import Want
from domain.exceptions import (
    AggregateNotFoundError,
    InfrastructureError,
    InvalidContentError,
    ValidationError,
)
from domain.value_objects.want_visibility import WantVisibility

logger = structlog.get_logger()

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class CreateWantUseCase:
    def __init__(
        self,
        want_repository: WantRepository,
        user_resolver: UserResolver,
        clock: Clock = utc_now,
    ) -> None:
        self.want_repository = want_repository
        self.user_resolver = user_resolver
        self.clock = clock

    async def execute(self, request: CreateWantRequest) -> Result[WantResponse, AppError]:
        try:
            logger.info("create_want_use_case_start", creator=request.creator)

            creator = await self.user_resolver.get_user_by_id(request.creator)
            if creator is None:
                msg = f"Creator id {request.creator} not found"
                raise AggregateNotFoundError(msg)

            visibility = request.visibility or WantVisibility()
            if request.location is not None:
                visibility = visibility.model_copy(update={"location": request.location})

            want = Want.create(
                creator=creator.user_id,
                title=request.title,
                description=request.description,
                visibility=visibility,
                now=self.clock(),
            )

            want_id = await self.want_repository.create(want)
            logger.info("want_created", want_id=want_id)

            # Return exactly what was persisted, including store-side normalization
            stored = await self.want_repository.get(want_id)
            if stored is None:
                msg = f"Want {want_id} missing right after creation"
                raise InfrastructureError(msg)

            logger.info("create_want_use_case_success", want_id=want_id)
            return Success(WantMapper.to_want_response(stored))
        except AggregateNotFoundError as e:
            logger.warning("creator_not_found", creator=request.creator, error=str(e))
            return Failure(AppError("not_found", str(e)))
        except ValidationError as e:
            logger.warning("validation_error", error=str(e))
            return Failure(AppError("validation", f"Validation error: {e!s}"))


class UpdateWantUseCase:
    """Merge a partial update onto a Want inside a single store transaction."""

    def __init__(
        self,
        want_repository: WantRepository,
        attach_image_use_case: AttachWantImageUseCase,
        clock: Clock = utc_now,
    ) -> None:
        self.want_repository = want_repository
        self.attach_image_use_case = attach_image_use_case
        self.clock = clock

    async def execute(
        self,
        want_id: str,
        request: UpdateWantRequest,
    ) -> Result[WantResponse, AppError]:
        try:
            logger.info(
                "update_want_use_case_start",
                want_id=want_id,
                fields=sorted(request.model_dump(exclude_none=True, exclude={"image"})),
                has_image=request.image is not None,
            )

            current = await self.want_repository.get(want_id)
            if current is None:
                msg = f"Want {want_id} not found"
                raise AggregateNotFoundError(msg)

            if request.is_empty():
                logger.info("update_want_noop", want_id=want_id)
                return Success(WantMapper.to_want_response(current))

            async def merge(want: Want) -> None:
                self._apply_fields(want, request)
                if request.image is not None:
                    # Upload before commit; a failed upload aborts the transaction
                    image = await self.attach_image_use_case.execute(want_id, request.image)
                    want.attach_image(image)
                want.touch(self.clock())

            await self.want_repository.transactional_update(want_id, merge)
            logger.info("want_updated", want_id=want_id)

            updated = await self.want_repository.get(want_id)
            if updated is None:
                msg = f"Want {want_id} not found"
                raise AggregateNotFoundError(msg)

            logger.info("update_want_use_case_success", want_id=want_id)
            return Success(WantMapper.to_want_response(updated))
        except AggregateNotFoundError as e:
            logger.warning("want_not_found", want_id=want_id, error=str(e))
            return Failure(AppError("not_found", str(e)))
        except InvalidContentError as e:
            logger.warning("invalid_content", want_id=want_id, error=str(e))
            return Failure(AppError("invalid_content", str(e)))
        except ValidationError as e:
            logger.warning("validation_error", want_id=want_id, error=str(e))
            return Failure(AppError("validation", f"Validation error: {e!s}"))

    @staticmethod
    def _apply_fields(want: Want, request: UpdateWantRequest) -> None:
        if request.admins is not None:
            want.replace_admins(request.admins)
        if request.title is not None:
            want.rename(request.title)
        if request.description is not None:
            want.update_description(request.description)
        if request.visibility is not None:
            want.change_visibility(request.visibility)
        if request.location is not None:
            want.relocate(request.location)
