"""
File Service for destination naming.
Finds free filenames for uploads moved into a directory.
"""
import os


class FileService:
    """Service for filesystem naming operations."""

    DEFAULT_FILENAME = "file"

    def get_available_name(self, directory: str, filename: str) -> str:
        """
        Get a path inside directory that is not currently taken.

        The client filename is reduced to its last path component, then
        numbered as name(1).ext, name(2).ext, ... until a free path is found.

        Args:
            directory: Target directory
            filename: Desired filename

        Returns:
            Free path inside directory
        """
        basename = self.sanitize_filename(filename)
        stem, extension = os.path.splitext(basename)

        candidate = os.path.join(directory, basename)
        counter = 1
        while os.path.lexists(candidate):
            candidate = os.path.join(directory, f"{stem}({counter}){extension}")
            counter += 1
        return candidate

    def sanitize_filename(self, filename: str) -> str:
        """Reduce a client filename to a plain name usable inside a directory."""
        basename = (filename or "").replace("\\", "/").split("/")[-1].strip()
        if basename in ("", ".", ".."):
            return self.DEFAULT_FILENAME
        return basename
