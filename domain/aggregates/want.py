from __future__ import annotations

from datetime import datetime

from domain.exceptions import ValidationError
from domain.value_objects.want_image import WantImage
from domain.value_objects.want_location import WantLocation
from domain.value_objects.want_visibility import WantVisibility


class Want:
    """The Aggregate Root for a Want.

    A Want is persisted as a single document. ``id`` is assigned by the
    store on insert and stays ``None`` until then.
    """

    def __init__(
        self,
        *,
        creator: str,
        admins: list[str],
        title: str,
        created_at: datetime,
        updated_at: datetime,
        description: str | None = None,
        visibility: WantVisibility | None = None,
        image: WantImage | None = None,
        id: str | None = None,  # noqa: A002
    ) -> None:
        if not creator or not creator.strip():
            msg = "creator must be provided"
            raise ValidationError(msg)
        if updated_at < created_at:
            msg = "updated_at cannot precede created_at"
            raise ValidationError(msg)

        self.id = id
        self.creator = creator
        self.admins = self._validate_admins(admins)
        self.title = self._validate_title(title)
        self.description = description or None
        self.visibility = visibility or WantVisibility()
        self.image = image
        self.created_at = created_at
        self.updated_at = updated_at

    @classmethod
    def create(
        cls,
        creator: str,
        title: str,
        now: datetime,
        description: str | None = None,
        visibility: WantVisibility | None = None,
    ) -> Want:
        """Create a new, not yet persisted Want (Factory Method).

        The creator becomes the sole admin and both timestamps are set to ``now``.
        """
        return cls(
            creator=creator,
            admins=[creator],
            title=title,
            description=description,
            visibility=visibility,
            created_at=now,
            updated_at=now,
        )

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Want(id={self.id!r}, title={self.title!r}, creator={self.creator!r})"

    @staticmethod
    def _validate_title(title: str) -> str:
        if not title or not title.strip():
            msg = "title must be provided"
            raise ValidationError(msg)
        return title.strip()

    @staticmethod
    def _validate_admins(admins: list[str]) -> list[str]:
        if not admins:
            msg = "a Want must have at least one admin"
            raise ValidationError(msg)
        if any(not admin or not admin.strip() for admin in admins):
            msg = "admin ids cannot be blank"
            raise ValidationError(msg)
        return list(dict.fromkeys(admins))

    # ============================================================================
    # COMMAND METHODS
    # ============================================================================

    def replace_admins(self, admins: list[str]) -> None:
        self.admins = self._validate_admins(admins)

    def rename(self, title: str) -> None:
        self.title = self._validate_title(title)

    def update_description(self, description: str) -> None:
        """Set the description; an empty string clears it."""
        self.description = description.strip() or None

    def change_visibility(self, visibility: WantVisibility) -> None:
        self.visibility = visibility

    def relocate(self, location: WantLocation) -> None:
        """Replace only the location filter, keeping who the Want is visible to."""
        self.visibility = self.visibility.model_copy(update={"location": location})

    def attach_image(self, image: WantImage) -> None:
        self.image = image

    def touch(self, now: datetime) -> None:
        self.updated_at = max(now, self.created_at)

    def is_admin(self, user_id: str) -> bool:
        return user_id in self.admins
