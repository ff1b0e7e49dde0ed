"""Blob store implementations backing the snippet tools."""

from __future__ import annotations

from typing import Dict, Optional, Protocol

from azure.core.exceptions import AzureError, ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import BlobServiceClient, ContainerClient, ContentSettings

from ..errors import SnippetNotFound, StoreUnavailable
from ..logging import get_logger
from ..settings import StorageSettings

LOGGER = get_logger(__name__)


class BlobStore(Protocol):
    def put(self, key: str, value: bytes) -> None:
        ...

    def get(self, key: str) -> bytes:
        ...


class InMemoryBlobStore:
    """Dict-backed store for local runs and tests."""

    def __init__(self, blobs: Optional[Dict[str, bytes]] = None) -> None:
        self.blobs: Dict[str, bytes] = dict(blobs or {})

    def put(self, key: str, value: bytes) -> None:
        self.blobs[key] = bytes(value)

    def get(self, key: str) -> bytes:
        try:
            return self.blobs[key]
        except KeyError:
            raise SnippetNotFound(key) from None


class AzureBlobStore:
    """Azure Blob Storage container holding one blob per snippet.

    Every call is a single request against the storage account. Failures
    other than a missing blob surface as :class:`StoreUnavailable`.
    """

    def __init__(self, container_client: ContainerClient) -> None:
        self.container_client = container_client
        self._container_ready = False

    @classmethod
    def from_connection_string(cls, connection_string: str, container: str) -> "AzureBlobStore":
        service = BlobServiceClient.from_connection_string(connection_string)
        return cls(service.get_container_client(container))

    def _ensure_container(self) -> None:
        if self._container_ready:
            return
        try:
            self.container_client.create_container()
            LOGGER.info("blob_container_created", container=self.container_client.container_name)
        except ResourceExistsError:
            pass
        self._container_ready = True

    def put(self, key: str, value: bytes) -> None:
        try:
            self._ensure_container()
            self.container_client.upload_blob(
                name=key,
                data=value,
                overwrite=True,
                content_settings=ContentSettings(content_type="text/plain; charset=utf-8"),
            )
        except AzureError as exc:
            LOGGER.error("blob_write_failed", blob=key, error=str(exc))
            raise StoreUnavailable() from exc

    def get(self, key: str) -> bytes:
        try:
            return self.container_client.download_blob(key).readall()
        except ResourceNotFoundError as exc:
            raise SnippetNotFound(key) from exc
        except AzureError as exc:
            LOGGER.error("blob_read_failed", blob=key, error=str(exc))
            raise StoreUnavailable() from exc


def build_blob_store(settings: StorageSettings) -> BlobStore:
    if settings.backend == "memory":
        LOGGER.info("blob_store_selected", backend="memory")
        return InMemoryBlobStore()
    if not settings.connection_string:
        raise ValueError("Missing required configuration value: AzureWebJobsStorage")
    LOGGER.info("blob_store_selected", backend="azure", container=settings.container)
    return AzureBlobStore.from_connection_string(settings.connection_string, settings.container)
