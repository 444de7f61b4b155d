import structlog

from application.dtos.want_dtos import WantImageUpload
from application.ports.blob_publisher import BlobPublisher
from application.ports.content_sniffer import ContentSniffer
from application.ports.repositories.want_repository import WantRepository
from domain.exceptions import AggregateNotFoundError, InvalidContentError
from domain.value_objects.want_image import WantImage

logger = structlog.get_logger()


class AttachWantImageUseCase:
    """Validate image bytes by content and publish them for a Want.

    Runs inside the update transaction, so it raises domain exceptions
    instead of returning a Result: any failure here must abort the commit.
    """

    def __init__(
        self,
        want_repository: WantRepository,
        blob_publisher: BlobPublisher,
        content_sniffer: ContentSniffer,
        key_prefix: str = "",
    ) -> None:
        self.want_repository = want_repository
        self.blob_publisher = blob_publisher
        self.content_sniffer = content_sniffer
        self.key_prefix = key_prefix

    def storage_key(self, want_id: str, extension: str) -> str:
        return f"{self.key_prefix}{want_id}.{extension}"

    async def execute(self, want_id: str, upload: WantImageUpload) -> WantImage:
        """Publish ``upload`` and return the image record to attach.

        Raises:
            AggregateNotFoundError: If the Want no longer exists.
            InvalidContentError: If the bytes match no known file type.

        """
        want = await self.want_repository.get(want_id)
        if want is None:
            msg = f"Want {want_id} not found"
            raise AggregateNotFoundError(msg)

        # Only the bytes decide the type; the declared MIME type is never trusted.
        detected = self.content_sniffer.detect(upload.data)
        if detected is None:
            logger.warning(
                "want_image_unrecognized",
                want_id=want_id,
                size_bytes=len(upload.data),
                declared_mime_type=upload.declared_mime_type,
            )
            msg = "Could not determine file type from image data"
            raise InvalidContentError(msg)

        if upload.declared_mime_type and upload.declared_mime_type != detected.mime_type:
            logger.warning(
                "want_image_declared_mime_type_mismatch",
                want_id=want_id,
                declared_mime_type=upload.declared_mime_type,
                detected_mime_type=detected.mime_type,
            )

        key = self.storage_key(want_id, detected.extension)
        url = self.blob_publisher.publish(key, upload.data, mime_type=detected.mime_type)
        logger.info(
            "want_image_published",
            want_id=want_id,
            storage_key=key,
            mime_type=detected.mime_type,
            size_bytes=len(upload.data),
        )
        return WantImage(url=url, mime_type=detected.mime_type)
