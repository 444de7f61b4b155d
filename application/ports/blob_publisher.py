from __future__ import annotations

from typing import Protocol


class BlobPublisher(Protocol):
    def publish(self, key: str, data: bytes, *, mime_type: str | None = None) -> str:
        """Store ``data`` under ``key``, overwriting any existing object.

        Returns a publicly resolvable URL for the stored object. Backend
        errors are raised unchanged.
        """
        ...

    def public_url(self, key: str) -> str: ...
