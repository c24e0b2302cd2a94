"""
Photo object storage.

Photos are keyed ``<prefix>/<user-id>/<timestamp-ms>.<extension>`` and
resolved to a public URL once stored.
"""

import logging
import mimetypes
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from wanderlog.config.settings import StorageSettings
from wanderlog.core.exceptions import PhotoUploadError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "bin"
MAX_KEY_ATTEMPTS = 1000


@dataclass
class PhotoUpload:
    """A photo file received with a memory form."""
    filename: str
    content_type: Optional[str]
    content: bytes

    @property
    def size_mb(self) -> float:
        return len(self.content) / (1024 * 1024)


def photo_extension(filename: str, content_type: Optional[str] = None) -> str:
    """Extension from the file name, else from the content type."""
    if "." in filename:
        ext = filename.rsplit(".", 1)[-1]
        if ext and ext.isalnum():
            return ext
    if content_type:
        guessed = mimetypes.guess_extension(content_type)
        if guessed:
            return guessed.lstrip(".")
    return DEFAULT_EXTENSION


def build_photo_key(prefix: str, user_id: int, extension: str, timestamp_ms: int) -> str:
    return f"{prefix.strip('/')}/{user_id}/{timestamp_ms}.{extension}"


class PhotoStorage(ABC):
    """Object storage for memory photos."""

    @abstractmethod
    def upload(self, user_id: int, photo: PhotoUpload) -> str:
        """
        Store a photo durably.

        Returns:
            The public URL of the stored photo

        Raises:
            PhotoUploadError: If the photo could not be stored
        """

    @abstractmethod
    def delete(self, url: str) -> None:
        """Remove a previously uploaded photo; unknown URLs are ignored."""


class LocalPhotoStorage(PhotoStorage):
    """Stores photos on the local filesystem, served under a public URL prefix."""

    def __init__(
        self,
        root: Path,
        prefix: str = "travel-photos",
        public_base_url: str = "/media",
        clock: Callable[[], float] = time.time,
    ):
        self.root = Path(root)
        self.prefix = prefix
        self.public_base_url = public_base_url.rstrip("/")
        self._clock = clock

    def _url_for(self, key: str) -> str:
        return f"{self.public_base_url}/{key}"

    def _key_for(self, url: str) -> Optional[str]:
        base = f"{self.public_base_url}/"
        if not url.startswith(base):
            return None
        return url[len(base):]

    def _write_new(self, user_id: int, extension: str, content: bytes) -> str:
        """Write content under a key no other photo holds; returns the key."""
        timestamp_ms = int(self._clock() * 1000)
        for _ in range(MAX_KEY_ATTEMPTS):
            key = build_photo_key(self.prefix, user_id, extension, timestamp_ms)
            path = self.root / key
            path.parent.mkdir(parents=True, exist_ok=True)
            try:
                with open(path, "xb") as fh:
                    fh.write(content)
                return key
            except FileExistsError:
                timestamp_ms += 1
        raise FileExistsError(f"No free photo key for user {user_id} near {timestamp_ms}")

    def upload(self, user_id: int, photo: PhotoUpload) -> str:
        extension = photo_extension(photo.filename, photo.content_type)
        try:
            key = self._write_new(user_id, extension, photo.content)
        except OSError as exc:
            logger.error(
                f"Photo upload failed for user {user_id}: {exc}",
                extra={"user_id": user_id},
            )
            raise PhotoUploadError(details={"user_id": user_id}) from exc

        logger.info(f"Stored photo {key} ({len(photo.content)} bytes)", extra={"user_id": user_id})
        return self._url_for(key)

    def delete(self, url: str) -> None:
        key = self._key_for(url)
        if key is None:
            logger.warning(f"Ignoring delete of foreign photo URL {url}")
            return
        (self.root / key).unlink(missing_ok=True)
        logger.info(f"Removed photo {key}")


def create_photo_storage(storage_settings: StorageSettings) -> PhotoStorage:
    """
    Create the configured photo storage backend.

    Raises:
        ValueError: If the configured backend is unknown
    """
    if storage_settings.backend == "local":
        return LocalPhotoStorage(
            root=storage_settings.get_upload_path(),
            prefix=storage_settings.photo_prefix,
            public_base_url=storage_settings.public_base_url,
        )
    raise ValueError(f"Unknown photo storage backend: {storage_settings.backend}")
