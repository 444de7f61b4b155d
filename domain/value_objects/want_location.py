from pydantic import BaseModel, Field, field_validator


class WantLocation(BaseModel):
    """Geolocation filter attached to a Want's visibility."""

    address: str
    radius_in_meters: float = Field(..., gt=0)

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        """Validate that address is not blank or empty."""
        if not v or not v.strip():
            msg = "Address cannot be blank or empty"
            raise ValueError(msg)
        return v.strip()
