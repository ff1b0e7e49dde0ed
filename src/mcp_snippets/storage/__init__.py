"""Blob storage for snippet content."""

from .blob import AzureBlobStore, BlobStore, InMemoryBlobStore, build_blob_store
from .keys import InvalidSnippetName, normalize_snippet_name, snippet_blob_name

__all__ = [
    "AzureBlobStore",
    "BlobStore",
    "InMemoryBlobStore",
    "InvalidSnippetName",
    "build_blob_store",
    "normalize_snippet_name",
    "snippet_blob_name",
]
