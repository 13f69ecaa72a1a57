"""
Unit tests for application settings.
"""
import os
import tempfile
from http_upload.core.config import Settings


class TestSettings:
    """Test suite for Settings."""
    
    def test_default_upload_dir(self, monkeypatch):
        """Test uploads go to a relative directory by default."""
        monkeypatch.delenv("UPLOAD_DIR", raising=False)
        monkeypatch.delenv("AWS_LAMBDA_FUNCTION_NAME", raising=False)
        assert Settings().upload_dir == "uploads"
    
    def test_lambda_upload_dir_is_writable_location(self, monkeypatch):
        """Test uploads default below the temp directory on AWS Lambda."""
        monkeypatch.delenv("UPLOAD_DIR", raising=False)
        monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "http-upload")
        assert Settings().upload_dir == os.path.join(tempfile.gettempdir(), "uploads")
    
    def test_upload_dir_from_environment(self, monkeypatch):
        """Test UPLOAD_DIR overrides the default, also on Lambda."""
        monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "http-upload")
        monkeypatch.setenv("UPLOAD_DIR", "/data/uploads")
        assert Settings().upload_dir == "/data/uploads"
    
    def test_blocked_extension_list(self, monkeypatch):
        """Test blocked extensions are normalized."""
        monkeypatch.setenv("BLOCKED_EXTENSIONS", " exe, .SH ,,")
        assert Settings().blocked_extension_list == [".exe", ".sh"]
