from pydantic import BaseModel, field_validator

from domain.value_objects.visible_to import VisibleTo
from domain.value_objects.want_location import WantLocation


class WantVisibility(BaseModel):
    """Who may view a Want.

    ``visible_to`` is either a named visibility class or an explicit
    allow-list of user ids. ``location`` optionally narrows it further
    to users around an address.
    """

    visible_to: VisibleTo | list[str] = VisibleTo.PUBLIC
    location: WantLocation | None = None

    @field_validator("visible_to")
    @classmethod
    def validate_visible_to(cls, v: VisibleTo | list[str]) -> VisibleTo | list[str]:
        if isinstance(v, list):
            if any(not user_id or not user_id.strip() for user_id in v):
                msg = "Allow-list entries cannot be blank"
                raise ValueError(msg)
            return list(dict.fromkeys(v))
        return v
