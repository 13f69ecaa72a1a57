"""
Core configuration for the HTTP Upload API.
Manages environment variables and upload storage settings.
"""
import os
import tempfile
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_upload_dir() -> str:
    """Upload directory used when UPLOAD_DIR is not set.

    AWS Lambda only allows writes below the temp directory.
    """
    if os.getenv("AWS_LAMBDA_FUNCTION_NAME"):
        return os.path.join(tempfile.gettempdir(), "uploads")
    return "uploads"


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""
    
    # API Configuration
    api_title: str = os.getenv("API_TITLE", "HTTP Upload API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    
    # Upload Storage
    upload_dir: str = Field(default_factory=default_upload_dir)
    upload_tmp_dir: str = os.getenv("UPLOAD_TMP_DIR", tempfile.gettempdir())
    
    # Upload Limits
    max_file_size_mb: int = int(os.getenv("MAX_FILE_SIZE_MB", "10"))
    blocked_extensions: str = os.getenv("BLOCKED_EXTENSIONS", "")
    
    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    
    # Environment
    environment: str = os.getenv("ENVIRONMENT", "dev")
    
    @property
    def max_file_size_bytes(self) -> int:
        """Maximum accepted upload size in bytes."""
        return self.max_file_size_mb * 1024 * 1024
    
    @property
    def blocked_extension_list(self) -> List[str]:
        """Blocked extensions, lower-cased and dot-prefixed."""
        extensions = []
        for item in self.blocked_extensions.split(","):
            item = item.strip().lower()
            if item:
                extensions.append(item if item.startswith(".") else f".{item}")
        return extensions
    
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


# Global settings instance
settings = Settings()
