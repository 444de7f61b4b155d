from datetime import UTC, datetime
from typing import Any

from domain.aggregates.want import Want
from domain.value_objects.want_image import WantImage
from domain.value_objects.want_visibility import WantVisibility


def _to_bson_datetime(value: datetime) -> datetime:
    # BSON dates carry millisecond precision, always UTC
    value = value.astimezone(UTC) if value.tzinfo else value.replace(tzinfo=UTC)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def _from_bson_datetime(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)


class WantDocumentCodec:
    """Translates between the Want aggregate and its MongoDB document.

    This lives in Infrastructure because it's a serialization concern.
    The document id (``_id``) is owned by the repository, not the codec.
    """

    @staticmethod
    def encode(want: Want) -> dict[str, Any]:
        return {
            "creator": want.creator,
            "admins": list(want.admins),
            "title": want.title,
            "description": want.description,
            "visibility": want.visibility.model_dump(mode="json"),
            "image": want.image.model_dump(mode="json") if want.image else None,
            "created_at": _to_bson_datetime(want.created_at),
            "updated_at": _to_bson_datetime(want.updated_at),
        }

    @staticmethod
    def decode(want_id: str, doc: dict[str, Any]) -> Want:
        image = doc.get("image")
        return Want(
            id=want_id,
            creator=doc["creator"],
            admins=doc["admins"],
            title=doc["title"],
            description=doc.get("description"),
            visibility=WantVisibility.model_validate(doc.get("visibility") or {}),
            image=WantImage.model_validate(image) if image else None,
            created_at=_from_bson_datetime(doc["created_at"]),
            updated_at=_from_bson_datetime(doc["updated_at"]),
        )
