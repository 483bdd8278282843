"""
Download record validation.

Storefront applications keep downloadable files as records whose file URL
may point at object storage. These helpers look the URL up through a
DownloadFileLookup and check whether it is a valid storage path, so the
resolver itself never has to know about the host application's records.
"""
from __future__ import annotations

import logging
from typing import Hashable, Iterable, Mapping, Optional, Protocol

from .helpers import ErrorCallback, is_valid_path

__all__ = ["DownloadFileLookup", "MappingDownloadLookup", "is_download_file_valid_path"]

logger = logging.getLogger(__name__)


class DownloadFileLookup(Protocol):
    """
    Protocol for looking up the raw file URL behind a download record.

    Implementations adapt a host application's storage (a shop's product
    downloads, a digital-delivery plugin's file lists) to a single call.
    """

    def get_file(self, record_id: Hashable, file_id: Optional[Hashable] = None) -> Optional[str]:
        """
        Return the file URL for a record, or None if it does not exist.

        Args:
            record_id: Identifier of the download record (product, download)
            file_id: Identifier of one file within the record; None selects
                no file
        """
        ...


class MappingDownloadLookup:
    """
    In-memory DownloadFileLookup over a mapping of record id to files.

    Example:
        >>> lookup = MappingDownloadLookup({42: {"main": "/bucket/file.zip"}})
        >>> lookup.get_file(42, "main")
        '/bucket/file.zip'
    """

    def __init__(self, records: Mapping[Hashable, Mapping[Hashable, str]]):
        self._records = {record_id: dict(files) for record_id, files in records.items()}

    def get_file(self, record_id: Hashable, file_id: Optional[Hashable] = None) -> Optional[str]:
        files = self._records.get(record_id)
        if not files or file_id is None:
            return None
        return files.get(file_id)


def is_download_file_valid_path(
    lookup: DownloadFileLookup,
    record_id: Hashable,
    file_id: Optional[Hashable] = None,
    default_bucket: str = "",
    allowed_extensions: Iterable[str] = (),
    disallowed_protocols: Iterable[str] = (),
    error_callback: Optional[ErrorCallback] = None,
) -> bool:
    """
    Check whether a download record's file is stored at a valid storage path.

    Args:
        lookup: Source of download file URLs
        record_id: Download record to check; falsy ids are rejected
        file_id: File within the record; None is rejected
        default_bucket: Bucket used when the file URL does not name one
        allowed_extensions: Allowed file extensions without leading dots
        disallowed_protocols: Protocols rejected in paths; empty keeps the defaults
        error_callback: Passed through to is_valid_path

    Returns:
        True if a file id is given, the file exists with a non-blank URL,
        and that URL is a valid storage path
    """
    if not record_id or file_id is None:
        return False

    file_url = lookup.get_file(record_id, file_id)
    if file_url is None or not file_url.strip():
        logger.debug(f"No file URL for download record {record_id!r} (file {file_id!r})")
        return False

    return is_valid_path(
        file_url.strip(),
        default_bucket,
        allowed_extensions,
        disallowed_protocols,
        error_callback,
    )
