from __future__ import annotations

from lagom import Container
from motor.motor_asyncio import AsyncIOMotorClient

from application.ports.blob_publisher import BlobPublisher
from application.ports.content_sniffer import ContentSniffer
from application.ports.repositories.want_repository import WantRepository
from application.ports.user_resolver import UserResolver
from application.queries.want_queries import GetWantByIdQuery
from application.use_cases.want_image_use_cases import AttachWantImageUseCase
from application.use_cases.want_use_cases import CreateWantUseCase, UpdateWantUseCase
from infrastructure.blob_stores.fsspec_blob_publisher import FsspecBlobPublisher
from infrastructure.config import Settings, settings
from infrastructure.file_services.filetype_content_sniffer import FiletypeContentSniffer
from infrastructure.mongo_repositories.mongo_user_resolver import MongoUserResolver
from infrastructure.mongo_repositories.mongo_want_repository import MongoWantRepository


def create_container(app_settings: Settings = settings) -> Container:
    container = Container()

    container[Settings] = app_settings

    # Register MongoDB Client (pooled, shared across requests)
    container[AsyncIOMotorClient] = AsyncIOMotorClient(app_settings.mongo_uri, tz_aware=True)

    # Register Repositories
    container[WantRepository] = lambda c: MongoWantRepository(
        client=c[AsyncIOMotorClient],
        settings=c[Settings],
    )
    container[UserResolver] = lambda c: MongoUserResolver(
        client=c[AsyncIOMotorClient],
        settings=c[Settings],
    )

    # Register Blob Storage
    container[BlobPublisher] = FsspecBlobPublisher(
        app_settings.blob_base_url,
        public_base_url=app_settings.blob_public_base_url,
        storage_options=app_settings.blob_storage_options,
    )
    container[ContentSniffer] = FiletypeContentSniffer()

    # Register Use Cases
    container[AttachWantImageUseCase] = lambda c: AttachWantImageUseCase(
        want_repository=c[WantRepository],
        blob_publisher=c[BlobPublisher],
        content_sniffer=c[ContentSniffer],
        key_prefix=c[Settings].want_images_prefix,
    )
    container[CreateWantUseCase] = lambda c: CreateWantUseCase(
        want_repository=c[WantRepository],
        user_resolver=c[UserResolver],
    )
    container[UpdateWantUseCase] = lambda c: UpdateWantUseCase(
        want_repository=c[WantRepository],
        attach_image_use_case=c[AttachWantImageUseCase],
    )

    # Register Queries
    container[GetWantByIdQuery] = lambda c: GetWantByIdQuery(want_repository=c[WantRepository])

    return container
