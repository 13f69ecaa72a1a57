"""
Upload Entry domain model.
Raw metadata of one uploaded form field as produced by the host.
"""
from typing import Any, Mapping, NamedTuple


class UploadEntry(NamedTuple):
    """Immutable record of one uploaded field. Values are stored as received."""
    name: Any = ""
    mime_type: Any = ""
    temp_path: Any = ""
    size: Any = 0
    error_code: Any = 0
    
    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "UploadEntry":
        """
        Build an entry from a loose upload mapping.
        
        Args:
            raw: Mapping with the keys name, type, tmp_name, size and error
            
        Returns:
            UploadEntry holding the raw values
        """
        return cls(
            name=raw.get("name", ""),
            mime_type=raw.get("type", ""),
            temp_path=raw.get("tmp_name", ""),
            size=raw.get("size", 0),
            error_code=raw.get("error", 0)
        )
