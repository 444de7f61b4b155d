"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from application.use_cases.want_image_use_cases import AttachWantImageUseCase
from application.use_cases.want_use_cases import CreateWantUseCase, UpdateWantUseCase
from domain.value_objects.visible_to import VisibleTo
from domain.value_objects.want_location import WantLocation
from domain.value_objects.want_visibility import WantVisibility
from infrastructure.file_services.filetype_content_sniffer import FiletypeContentSniffer
from tests.mocks import (
    FakeClock,
    InMemoryUserResolver,
    InMemoryWantRepository,
    RecordingBlobPublisher,
)


@pytest.fixture
def creator_id() -> str:
    return "user-alice"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def want_repository() -> InMemoryWantRepository:
    return InMemoryWantRepository()


@pytest.fixture
def user_resolver(creator_id: str) -> InMemoryUserResolver:
    return InMemoryUserResolver({creator_id, "user-bob"})


@pytest.fixture
def blob_publisher() -> RecordingBlobPublisher:
    return RecordingBlobPublisher()


@pytest.fixture
def attach_image_use_case(
    want_repository: InMemoryWantRepository,
    blob_publisher: RecordingBlobPublisher,
) -> AttachWantImageUseCase:
    return AttachWantImageUseCase(
        want_repository=want_repository,
        blob_publisher=blob_publisher,
        content_sniffer=FiletypeContentSniffer(),
    )


@pytest.fixture
def create_use_case(
    want_repository: InMemoryWantRepository,
    user_resolver: InMemoryUserResolver,
    clock: FakeClock,
) -> CreateWantUseCase:
    return CreateWantUseCase(want_repository, user_resolver, clock=clock)


@pytest.fixture
def update_use_case(
    want_repository: InMemoryWantRepository,
    attach_image_use_case: AttachWantImageUseCase,
    clock: FakeClock,
) -> UpdateWantUseCase:
    return UpdateWantUseCase(want_repository, attach_image_use_case, clock=clock)


@pytest.fixture
def sample_visibility() -> WantVisibility:
    """Create a sample WantVisibility limited to friends around an address."""
    return WantVisibility(
        visible_to=VisibleTo.FRIENDS,
        location=WantLocation(address="1 Main St, Springfield", radius_in_meters=500),
    )
