from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Wants", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )

    # API
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8000, validation_alias="API_PORT")

    # MongoDB (transactions require a replica set)
    mongo_uri: str = Field(
        default="mongodb://localhost:27017/?replicaSet=rs0",
        validation_alias="MONGO_URI",
    )
    mongo_db: str = Field(default="wants", validation_alias="MONGO_DB")
    mongo_wants_collection: str = Field(
        default="wants",
        validation_alias="MONGO_WANTS_COLLECTION",
    )
    mongo_users_collection: str = Field(
        default="users",
        validation_alias="MONGO_USERS_COLLECTION",
    )

    # Blob Storage
    blob_base_url: str = Field(
        default="file://" + str(Path(__file__).resolve().parents[1] / "blobs" / "want-images"),
        validation_alias="BLOB_BASE_URL",
        description="fsspec URL of the want images location, e.g. gs://my-bucket",
    )
    blob_public_base_url: str | None = Field(
        default=None,
        validation_alias="BLOB_PUBLIC_BASE_URL",
        description="Public prefix for image URLs, e.g. https://storage.googleapis.com/my-bucket",
    )
    blob_storage_options: dict = {}
    want_images_prefix: str = Field(default="", validation_alias="WANT_IMAGES_PREFIX")


# Global settings instance
settings = Settings()
