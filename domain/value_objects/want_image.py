from pydantic import BaseModel


class WantImage(BaseModel):
    """Image attached to a Want once it has been published to object storage."""

    url: str
    mime_type: str | None = None
