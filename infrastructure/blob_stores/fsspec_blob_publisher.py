from __future__ import annotations

import fsspec
from fsspec.implementations.local import LocalFileSystem

from application.ports.blob_publisher import BlobPublisher


class FsspecBlobPublisher(BlobPublisher):
    """Publishes blobs to any fsspec filesystem (gs://, s3://, file://, memory://).

    ``public_base_url`` is the prefix clients resolve objects under. It
    defaults to ``base_url``, which only makes sense for filesystems that
    are themselves publicly reachable.
    """

    def __init__(
        self,
        base_url: str,
        *,
        public_base_url: str | None = None,
        storage_options: dict | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.public_base_url = (public_base_url or base_url).rstrip("/")
        self.storage_options = storage_options or {}

    def _url(self, key: str) -> str:
        return f"{self.base_url}/{key}"

    def publish(self, key: str, data: bytes, *, mime_type: str | None = None) -> str:  # noqa: ARG002
        fs, path = fsspec.core.url_to_fs(self._url(key), **self.storage_options)
        if isinstance(fs, LocalFileSystem):
            fs.makedirs(fs._parent(path), exist_ok=True)  # noqa: SLF001

        # "wb" truncates, so a repeated key replaces the previous object
        with fs.open(path, "wb") as out:
            out.write(data)

        return self.public_url(key)

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{key}"
