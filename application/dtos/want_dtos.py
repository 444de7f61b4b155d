from datetime import datetime

from pydantic import BaseModel, Field

from domain.value_objects.want_image import WantImage
from domain.value_objects.want_location import WantLocation
from domain.value_objects.want_visibility import WantVisibility


class NewWant(BaseModel):
    """Caller-supplied content of a Want to create."""

    title: str = Field(..., min_length=1, description="Title of the Want")
    description: str | None = Field(None, description="Free text description")
    visibility: WantVisibility | None = Field(None, description="Who may view the Want")
    location: WantLocation | None = Field(
        None,
        description="Geolocation filter; stored as visibility.location",
    )


class CreateWantRequest(NewWant):
    creator: str = Field(..., min_length=1, description="Id of the user creating the Want")


class WantChanges(BaseModel):
    """Field changes of a partial update. ``None`` means "leave untouched".

    An empty ``description`` clears it.
    """

    admins: list[str] | None = None
    title: str | None = None
    description: str | None = None
    visibility: WantVisibility | None = None
    location: WantLocation | None = None


class WantImageUpload(BaseModel):
    """Raw image bytes supplied with an update.

    ``declared_mime_type`` is whatever the client claimed. It is kept for
    diagnostics only; the stored type always comes from sniffing ``data``.
    """

    data: bytes
    declared_mime_type: str | None = None


class UpdateWantRequest(WantChanges):
    image: WantImageUpload | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in type(self).model_fields)


class WantResponse(BaseModel):
    want_id: str
    creator: str
    admins: list[str]
    title: str
    description: str | None = None
    visibility: WantVisibility
    image: WantImage | None = None
    created_at: datetime
    updated_at: datetime
