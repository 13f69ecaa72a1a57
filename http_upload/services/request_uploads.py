"""
Request Uploads for the current request.
Holds the uploaded field table and the move primitive for accepted uploads.
"""
import logging
import os
import shutil
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional, Set
from http_upload.models.upload_entry import UploadEntry

logger = logging.getLogger(__name__)


class RequestUploads(Mapping):
    """
    Upload table of one request, keyed by form field name.

    Only temp files registered as accepted, i.e. written by the upload
    mechanism itself, can be relocated through move_uploaded_file.
    """

    def __init__(self, files: Optional[Dict[str, UploadEntry]] = None):
        self.files: Dict[str, UploadEntry] = dict(files or {})
        self._accepted: Set[str] = set()

    @classmethod
    def from_mapping(cls, raw: Mapping) -> "RequestUploads":
        """
        Build an upload table from loose per-field mappings.

        None of the resulting temp paths is accepted.
        """
        return cls({
            field_name: UploadEntry.from_dict(values)
            for field_name, values in raw.items()
        })

    def add(self, field_name: str, entry: UploadEntry, accepted: bool = False) -> None:
        """Register an entry, optionally accepting its temp file."""
        self.files[field_name] = entry
        if accepted and entry.temp_path:
            self._accepted.add(os.path.abspath(entry.temp_path))
            logger.debug("Accepted temp upload %s for field %s", entry.temp_path, field_name)

    def is_uploaded_file(self, path: Any) -> bool:
        """Check whether path is a temp file produced by the upload mechanism."""
        if not path or not isinstance(path, str):
            return False
        return os.path.abspath(path) in self._accepted

    def move_uploaded_file(self, temp_path: Any, destination: str) -> bool:
        """
        Move an accepted upload to its destination.

        Args:
            temp_path: Temp file reported for the upload
            destination: Full target path

        Returns:
            True if the file was moved, False otherwise
        """
        if not self.is_uploaded_file(temp_path):
            logger.warning("Refusing to move %r: not an accepted upload", temp_path)
            return False

        try:
            shutil.move(temp_path, destination)
        except OSError as e:
            logger.error("Failed to move upload %s to %s: %s", temp_path, destination, e)
            return False

        self._accepted.discard(os.path.abspath(temp_path))
        return True

    def cleanup(self) -> int:
        """
        Delete accepted temp files that were never moved.

        Returns:
            Number of files removed
        """
        removed = 0
        for path in sorted(self._accepted):
            try:
                os.remove(path)
                removed += 1
            except FileNotFoundError:
                pass
            except OSError as e:
                logger.warning("Could not remove temp upload %s: %s", path, e)
        self._accepted.clear()
        if removed:
            logger.info("Removed %d unclaimed temp upload(s)", removed)
        return removed

    def __getitem__(self, field_name: str) -> UploadEntry:
        return self.files[field_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __repr__(self):
        return f"RequestUploads(fields={list(self.files)})"
