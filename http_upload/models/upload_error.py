"""
Upload error codes and their messages.
The message table is process-wide read-only data.
"""
from enum import IntEnum
from types import MappingProxyType


class UploadError(IntEnum):
    """Status codes reported by the upload mechanism for one file."""
    OK = 0
    INI_SIZE = 1
    FORM_SIZE = 2
    PARTIAL = 3
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8


UNKNOWN_ERROR_MESSAGE = "Unknown error"

# OK has no entry on purpose: its lookup yields UNKNOWN_ERROR_MESSAGE
ERROR_MESSAGES = MappingProxyType({
    UploadError.INI_SIZE: "The uploaded file exceeds the maximum file size configured on the server",
    UploadError.FORM_SIZE: "The uploaded file exceeds the MAX_FILE_SIZE directive "
                           "that was specified in the HTML form",
    UploadError.PARTIAL: "The uploaded file was only partially uploaded",
    UploadError.NO_FILE: "No file was uploaded",
    UploadError.NO_TMP_DIR: "Missing a temporary folder",
    UploadError.CANT_WRITE: "Failed to write file to disk",
    UploadError.EXTENSION: "An upload filter stopped the file upload",
})


def get_error_message(code: int) -> str:
    """Return the message for an upload error code."""
    return ERROR_MESSAGES.get(code, UNKNOWN_ERROR_MESSAGE)
