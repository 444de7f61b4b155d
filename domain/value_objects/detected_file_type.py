from pydantic import BaseModel


class DetectedFileType(BaseModel):
    """File type inferred from the leading bytes of an upload."""

    extension: str
    mime_type: str
