"""Tests for Want lifecycle use cases."""

from __future__ import annotations

import asyncio

import pytest
from returns.result import Failure, Success

from application.dtos.want_dtos import (
    CreateWantRequest,
    UpdateWantRequest,
    WantImageUpload,
    WantResponse,
)
from application.queries.want_queries import GetWantByIdQuery
from application.use_cases.want_image_use_cases import AttachWantImageUseCase
from application.use_cases.want_use_cases import CreateWantUseCase, UpdateWantUseCase
from domain.exceptions import AggregateNotFoundError, InvalidContentError
from domain.value_objects.visible_to import VisibleTo
from domain.value_objects.want_location import WantLocation
from domain.value_objects.want_visibility import WantVisibility
from infrastructure.file_services.filetype_content_sniffer import FiletypeContentSniffer
from tests.mocks import (
    JPEG_BYTES,
    NOT_AN_IMAGE_BYTES,
    OTHER_PNG_BYTES,
    PNG_BYTES,
    RecordingBlobPublisher,
)


async def _create(create_use_case: CreateWantUseCase, creator_id: str, **fields) -> WantResponse:
    fields.setdefault("title", "Bike pump")
    result = await create_use_case.execute(CreateWantRequest(creator=creator_id, **fields))
    assert isinstance(result, Success)
    return result.unwrap()


class TestCreateWantUseCase:
    @pytest.mark.asyncio
    async def test_create_want_success(
        self,
        create_use_case,
        want_repository,
        creator_id,
        sample_visibility,
    ) -> None:
        want = await _create(
            create_use_case,
            creator_id,
            description="Any brand is fine",
            visibility=sample_visibility,
        )

        assert want.creator == creator_id
        assert want.admins == [creator_id]
        assert want.title == "Bike pump"
        assert want.description == "Any brand is fine"
        assert want.visibility == sample_visibility
        assert want.image is None
        assert want.created_at == want.updated_at
        assert want_repository.create_calls == 1

    @pytest.mark.asyncio
    async def test_create_round_trip(self, create_use_case, want_repository, creator_id) -> None:
        created = await _create(create_use_case, creator_id)

        fetched = await GetWantByIdQuery(want_repository).execute(created.want_id)

        assert fetched == created

    @pytest.mark.asyncio
    async def test_create_unknown_creator_is_not_found(
        self,
        create_use_case,
        want_repository,
    ) -> None:
        result = await create_use_case.execute(
            CreateWantRequest(creator="user-ghost", title="Bike pump"),
        )

        assert isinstance(result, Failure)
        assert result.failure().category == "not_found"
        assert want_repository.create_calls == 0
        assert want_repository.documents == {}

    @pytest.mark.asyncio
    async def test_create_blank_title_is_validation_error(
        self,
        create_use_case,
        want_repository,
        creator_id,
    ) -> None:
        result = await create_use_case.execute(CreateWantRequest(creator=creator_id, title="   "))

        assert isinstance(result, Failure)
        assert result.failure().category == "validation"
        assert want_repository.create_calls == 0

    @pytest.mark.asyncio
    async def test_create_location_goes_into_visibility(self, create_use_case, creator_id) -> None:
        location = WantLocation(address="Market Square", radius_in_meters=250)

        want = await _create(create_use_case, creator_id, location=location)

        assert want.visibility.visible_to == VisibleTo.PUBLIC
        assert want.visibility.location == location


class TestGetWantByIdQuery:
    @pytest.mark.asyncio
    async def test_missing_want_is_none(self, want_repository) -> None:
        assert await GetWantByIdQuery(want_repository).execute("nonexistent") is None


class TestUpdateWantUseCase:
    @pytest.mark.asyncio
    async def test_update_title_only_changes_title_and_updated_at(
        self,
        create_use_case,
        update_use_case,
        creator_id,
        sample_visibility,
    ) -> None:
        want = await _create(
            create_use_case,
            creator_id,
            description="Any brand",
            visibility=sample_visibility,
        )
        with_image = (
            await update_use_case.execute(
                want.want_id,
                UpdateWantRequest(image=WantImageUpload(data=PNG_BYTES)),
            )
        ).unwrap()

        result = await update_use_case.execute(want.want_id, UpdateWantRequest(title="X"))

        assert isinstance(result, Success)
        updated = result.unwrap()
        assert updated.title == "X"
        assert updated.updated_at > with_image.updated_at
        unchanged = {"title", "updated_at"}
        assert updated.model_dump(exclude=unchanged) == with_image.model_dump(exclude=unchanged)

    @pytest.mark.asyncio
    async def test_empty_update_is_noop(
        self,
        create_use_case,
        update_use_case,
        want_repository,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)

        result = await update_use_case.execute(want.want_id, UpdateWantRequest())

        assert isinstance(result, Success)
        assert result.unwrap() == want
        assert want_repository.committed_transactions == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("want_id", ["nonexistent", "65f0c0ffee0000000000beef"])
    async def test_update_missing_want_is_not_found(self, update_use_case, want_id) -> None:
        result = await update_use_case.execute(want_id, UpdateWantRequest(title="X"))

        assert isinstance(result, Failure)
        assert result.failure().category == "not_found"

    @pytest.mark.asyncio
    async def test_empty_update_on_missing_want_is_not_found(self, update_use_case) -> None:
        result = await update_use_case.execute("nonexistent", UpdateWantRequest())

        assert isinstance(result, Failure)
        assert result.failure().category == "not_found"

    @pytest.mark.asyncio
    async def test_update_admins_and_visibility(
        self,
        create_use_case,
        update_use_case,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)
        visibility = WantVisibility(visible_to=["user-bob"])

        updated = (
            await update_use_case.execute(
                want.want_id,
                UpdateWantRequest(admins=[creator_id, "user-bob"], visibility=visibility),
            )
        ).unwrap()

        assert updated.admins == [creator_id, "user-bob"]
        assert updated.visibility == visibility
        assert updated.creator == creator_id
        assert updated.created_at == want.created_at

    @pytest.mark.asyncio
    async def test_location_is_applied_after_visibility(
        self,
        create_use_case,
        update_use_case,
        creator_id,
        sample_visibility,
    ) -> None:
        want = await _create(create_use_case, creator_id, visibility=sample_visibility)
        location = WantLocation(address="Harbour", radius_in_meters=1000)

        updated = (
            await update_use_case.execute(
                want.want_id,
                UpdateWantRequest(
                    visibility=WantVisibility(visible_to=VisibleTo.PRIVATE),
                    location=location,
                ),
            )
        ).unwrap()

        assert updated.visibility == WantVisibility(visible_to=VisibleTo.PRIVATE, location=location)

    @pytest.mark.asyncio
    async def test_empty_description_clears_it(
        self,
        create_use_case,
        update_use_case,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id, description="Any brand")

        updated = (
            await update_use_case.execute(want.want_id, UpdateWantRequest(description=""))
        ).unwrap()

        assert updated.description is None

    @pytest.mark.asyncio
    async def test_empty_admins_is_validation_error(
        self,
        create_use_case,
        update_use_case,
        want_repository,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)

        result = await update_use_case.execute(want.want_id, UpdateWantRequest(admins=[]))

        assert isinstance(result, Failure)
        assert result.failure().category == "validation"
        assert want_repository.committed_transactions == 0

    @pytest.mark.asyncio
    async def test_update_with_image_attaches_url(
        self,
        create_use_case,
        update_use_case,
        blob_publisher,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)

        updated = (
            await update_use_case.execute(
                want.want_id,
                UpdateWantRequest(title="Red bike pump", image=WantImageUpload(data=PNG_BYTES)),
            )
        ).unwrap()

        key = f"{want.want_id}.png"
        assert updated.title == "Red bike pump"
        assert updated.image is not None
        assert updated.image.url == blob_publisher.public_url(key)
        assert updated.image.mime_type == "image/png"
        assert blob_publisher.objects == {key: PNG_BYTES}

    @pytest.mark.asyncio
    async def test_unrecognized_image_is_invalid_content(
        self,
        create_use_case,
        update_use_case,
        want_repository,
        blob_publisher,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)

        result = await update_use_case.execute(
            want.want_id,
            UpdateWantRequest(
                title="X",
                image=WantImageUpload(data=NOT_AN_IMAGE_BYTES, declared_mime_type="image/png"),
            ),
        )

        assert isinstance(result, Failure)
        assert result.failure().category == "invalid_content"
        assert blob_publisher.publish_calls == []
        fetched = await GetWantByIdQuery(want_repository).execute(want.want_id)
        assert fetched == want
        assert fetched.image is None

    @pytest.mark.asyncio
    async def test_second_upload_replaces_first(
        self,
        create_use_case,
        update_use_case,
        blob_publisher,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)

        for data in (PNG_BYTES, OTHER_PNG_BYTES):
            await update_use_case.execute(
                want.want_id,
                UpdateWantRequest(image=WantImageUpload(data=data)),
            )

        key = f"{want.want_id}.png"
        assert blob_publisher.objects == {key: OTHER_PNG_BYTES}

    @pytest.mark.asyncio
    async def test_upload_of_other_type_moves_url(
        self,
        create_use_case,
        update_use_case,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)

        for data in (PNG_BYTES, JPEG_BYTES):
            result = await update_use_case.execute(
                want.want_id,
                UpdateWantRequest(image=WantImageUpload(data=data)),
            )

        updated = result.unwrap()
        assert updated.image.url.endswith(f"/{want.want_id}.jpg")
        assert updated.image.mime_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_failed_upload_aborts_transaction(
        self,
        create_use_case,
        want_repository,
        attach_image_use_case,
        clock,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)
        attach_image_use_case.blob_publisher = RecordingBlobPublisher(
            fail_with=OSError("quota exceeded"),
        )
        use_case = UpdateWantUseCase(want_repository, attach_image_use_case, clock=clock)

        with pytest.raises(OSError, match="quota exceeded"):
            await use_case.execute(
                want.want_id,
                UpdateWantRequest(title="X", image=WantImageUpload(data=PNG_BYTES)),
            )

        assert want_repository.committed_transactions == 0
        assert await GetWantByIdQuery(want_repository).execute(want.want_id) == want

    @pytest.mark.asyncio
    async def test_concurrent_disjoint_updates_both_apply(
        self,
        create_use_case,
        update_use_case,
        want_repository,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)

        await asyncio.gather(
            update_use_case.execute(want.want_id, UpdateWantRequest(title="Tyre pump")),
            update_use_case.execute(want.want_id, UpdateWantRequest(description="Any brand")),
        )

        final = await GetWantByIdQuery(want_repository).execute(want.want_id)
        assert final.title == "Tyre pump"
        assert final.description == "Any brand"
        assert want_repository.committed_transactions == 2


class TestAttachWantImageUseCase:
    @pytest.mark.asyncio
    async def test_declared_mime_type_is_ignored(
        self,
        create_use_case,
        attach_image_use_case,
        blob_publisher,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)

        image = await attach_image_use_case.execute(
            want.want_id,
            WantImageUpload(data=PNG_BYTES, declared_mime_type="image/jpeg"),
        )

        assert image.mime_type == "image/png"
        assert blob_publisher.publish_calls == [(f"{want.want_id}.png", "image/png")]

    @pytest.mark.asyncio
    async def test_missing_want_raises(self, attach_image_use_case) -> None:
        with pytest.raises(AggregateNotFoundError):
            await attach_image_use_case.execute("nonexistent", WantImageUpload(data=PNG_BYTES))

    @pytest.mark.asyncio
    async def test_empty_bytes_raise_invalid_content(
        self,
        create_use_case,
        attach_image_use_case,
        creator_id,
    ) -> None:
        want = await _create(create_use_case, creator_id)

        with pytest.raises(InvalidContentError):
            await attach_image_use_case.execute(want.want_id, WantImageUpload(data=b""))

    @pytest.mark.asyncio
    async def test_key_prefix(self, create_use_case, want_repository, creator_id) -> None:
        want = await _create(create_use_case, creator_id)
        publisher = RecordingBlobPublisher()
        use_case = AttachWantImageUseCase(
            want_repository,
            publisher,
            FiletypeContentSniffer(),
            key_prefix="wants/",
        )

        image = await use_case.execute(want.want_id, WantImageUpload(data=JPEG_BYTES))

        assert image.url == publisher.public_url(f"wants/{want.want_id}.jpg")
