"""
HTTP Upload accessor.
Reads one uploaded field and moves its file to a final location.
"""
import logging
import math
import os
import re
from typing import Any
from http_upload.core.exceptions import (
    FieldNotFoundException,
    UploadFailedException,
    MoveFailedException
)
from http_upload.models.upload_error import get_error_message
from http_upload.services.file_service import FileService
from http_upload.services.request_uploads import RequestUploads

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*\+?(\d+)")


def _to_non_negative_int(value: Any) -> int:
    if isinstance(value, int):
        return max(int(value), 0)
    if isinstance(value, float):
        return max(int(value), 0) if math.isfinite(value) else 0
    if isinstance(value, (str, bytes)):
        text = value.decode("ascii", "ignore") if isinstance(value, bytes) else value
        match = _LEADING_INT.match(text)
        return int(match.group(1)) if match else 0
    return 0


class HttpUpload:
    """
    Accessor for a single uploaded file.

    For example:
        upload = HttpUpload("my_file", uploads)
        path = upload.move("/path/to/your/folder")
    """

    def __init__(self, name: str, uploads: RequestUploads, file_service: FileService = None):
        """
        Look up an uploaded field.

        Args:
            name: Form field name
            uploads: Upload table of the current request
            file_service: Service used to pick free filenames

        Raises:
            FieldNotFoundException: If the field was not uploaded
        """
        if name not in uploads:
            raise FieldNotFoundException(name)

        self.field_name = name
        self.uploads = uploads
        self.file_service = file_service or FileService()
        self._entry = uploads[name]

    @property
    def name(self) -> str:
        """Client supplied filename. Not safe to use as a path."""
        return self._text(self._entry.name)

    @property
    def mime_type(self) -> str:
        """Client declared MIME type."""
        return self._text(self._entry.mime_type)

    @property
    def temp_path(self) -> str:
        """Server side temp file holding the uploaded bytes."""
        return self._text(self._entry.temp_path)

    @property
    def size(self) -> int:
        return _to_non_negative_int(self._entry.size)

    @property
    def error_code(self) -> int:
        return _to_non_negative_int(self._entry.error_code)

    @property
    def error_message(self) -> str:
        """Message for the current error code. Code 0 also yields 'Unknown error'."""
        return get_error_message(self.error_code)

    def move(self, destination: str) -> str:
        """
        Move the uploaded file into a directory or onto a specific file.

        If destination is an existing directory, the file is stored under
        an available name derived from the client filename.

        Args:
            destination: A directory or a file path

        Returns:
            Destination filename

        Raises:
            UploadFailedException: If the upload itself reported an error
            MoveFailedException: If the file could not be moved
        """
        if self.error_code != 0:
            raise UploadFailedException(self.error_message, self.error_code)

        if os.path.isdir(destination):
            filename = self.file_service.get_available_name(destination, self.name)
        else:
            filename = destination

        if not self.uploads.move_uploaded_file(self.temp_path, filename):
            raise MoveFailedException("Could not move the uploaded file")

        logger.info("Moved upload field %s to %s (%d bytes)", self.field_name, filename, self.size)
        return filename

    @staticmethod
    def _text(value: Any) -> str:
        return "" if value is None else str(value)

    def __repr__(self):
        return f"HttpUpload(field={self.field_name}, name={self.name}, error_code={self.error_code})"
