"""
Shared test fixtures and utilities.
"""
import pytest
from http_upload.services.request_uploads import RequestUploads
from http_upload.models.upload_entry import UploadEntry


@pytest.fixture
def temp_dir(tmp_path):
    """Directory standing in for the upload temp storage."""
    path = tmp_path / "tmp"
    path.mkdir()
    return path


@pytest.fixture
def upload_dir(tmp_path):
    """Empty destination directory."""
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def make_upload(temp_dir):
    """Create an accepted temp upload and register it under a field name."""
    counter = {"n": 0}

    def _make(uploads: RequestUploads, field_name: str, name: str = "a.txt",
              content: bytes = b"abc", mime_type: str = "text/plain") -> UploadEntry:
        counter["n"] += 1
        temp_file = temp_dir / f"upl{counter['n']}"
        temp_file.write_bytes(content)
        entry = UploadEntry(
            name=name,
            mime_type=mime_type,
            temp_path=str(temp_file),
            size=len(content),
            error_code=0
        )
        uploads.add(field_name, entry, accepted=True)
        return entry

    return _make
