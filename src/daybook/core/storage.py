"""Object store clients for entry images.

The domain layer only needs ``put(key, data, content_type) -> url``. Two
backends are provided: an HTTP bucket API (Supabase Storage compatible) and
a local directory served as static files for development.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from pathlib import Path
from uuid import UUID

import httpx

from src.daybook.core.config import Settings, get_settings
from src.daybook.core.exceptions import StorageUnavailable
from src.daybook.core.logging import get_logger

logger = get_logger(__name__)

_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/heic": "heic",
}


def image_key(project_id: UUID, day: int, content_type: str | None) -> str:
    """Build the object key for a day's image.

    Keys are unique per upload so a replaced image never overwrites the
    blob an existing entry still points to.
    """
    extension = _EXTENSIONS.get((content_type or "").split(";")[0].strip().lower(), "bin")
    return f"{project_id}/{day}-{time.time_ns() // 1_000_000}.{extension}"


class ObjectStore(ABC):
    """Binary store that returns a retrievable URL for each stored object."""

    @abstractmethod
    async def put(self, key: str, data: bytes, content_type: str | None = None) -> str:
        """Store ``data`` under ``key`` and return its public URL.

        Raises:
            StorageUnavailable: If the store cannot be reached or times out.
        """

    async def close(self) -> None:  # noqa: B027
        """Release any held resources."""


class HttpObjectStore(ObjectStore):
    """Bucket API over HTTP: ``POST {base}/object/{bucket}/{key}``."""

    def __init__(
        self,
        base_url: str,
        bucket: str,
        api_key: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.bucket = bucket
        headers = {"Authorization": f"Bearer {api_key}", "apikey": api_key} if api_key else {}
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout), headers=headers
        )

    def public_url(self, key: str) -> str:
        return f"{self.base_url}/object/public/{self.bucket}/{key}"

    async def put(self, key: str, data: bytes, content_type: str | None = None) -> str:
        url = f"{self.base_url}/object/{self.bucket}/{key}"
        headers = {"Content-Type": content_type or "application/octet-stream"}
        try:
            response = await self._client.post(url, content=data, headers=headers)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning("Object store timed out", key=key)
            raise StorageUnavailable("Image storage timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Object store rejected upload",
                key=key,
                status_code=e.response.status_code,
            )
            raise StorageUnavailable("Image storage rejected the upload") from e
        except httpx.HTTPError as e:
            logger.warning("Object store unreachable", key=key, error=str(e))
            raise StorageUnavailable("Image storage is unreachable") from e

        logger.info("Image stored", key=key, size=len(data))
        return self.public_url(key)

    async def close(self) -> None:
        await self._client.aclose()


class LocalObjectStore(ObjectStore):
    """Writes objects below a directory that is served at ``public_url``."""

    def __init__(self, root: str | Path, public_url: str, timeout: float = 10.0):
        self.root = Path(root)
        self.public_base = public_url.rstrip("/")
        self.timeout = timeout

    def _write(self, key: str, data: bytes) -> None:
        path = self.root / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    async def put(self, key: str, data: bytes, content_type: str | None = None) -> str:
        try:
            await asyncio.wait_for(asyncio.to_thread(self._write, key, data), self.timeout)
        except TimeoutError as e:
            logger.warning("Local image write timed out", key=key)
            raise StorageUnavailable("Image storage timed out") from e
        except OSError as e:
            logger.warning("Local image write failed", key=key, error=str(e))
            raise StorageUnavailable("Image storage is unavailable") from e

        logger.info("Image stored", key=key, size=len(data))
        return f"{self.public_base}/{key}"


_object_store: ObjectStore | None = None


def build_object_store(settings: Settings) -> ObjectStore:
    if settings.storage_backend == "http":
        return HttpObjectStore(
            settings.storage_url,
            settings.storage_bucket,
            api_key=settings.storage_api_key,
            timeout=settings.storage_timeout_seconds,
        )
    return LocalObjectStore(
        settings.storage_local_dir,
        settings.storage_public_url,
        timeout=settings.storage_timeout_seconds,
    )


def get_object_store() -> ObjectStore:
    """Get or create the object store singleton."""
    global _object_store
    if _object_store is None:
        _object_store = build_object_store(get_settings())
    return _object_store


async def close_object_store() -> None:
    global _object_store
    if _object_store is not None:
        await _object_store.close()
        _object_store = None
