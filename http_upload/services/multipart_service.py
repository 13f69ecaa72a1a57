"""
Multipart Service for incoming form data.
Spools uploaded files into temp storage and builds the request upload table.
"""
import logging
import os
import tempfile
from typing import Optional
import aiofiles
from starlette.datastructures import FormData, UploadFile
from http_upload.core import config
from http_upload.models.upload_entry import UploadEntry
from http_upload.models.upload_error import UploadError
from http_upload.services.request_uploads import RequestUploads

logger = logging.getLogger(__name__)


class MultipartService:
    """Service turning parsed multipart forms into upload entries."""

    MAX_FILE_SIZE_FIELD = "MAX_FILE_SIZE"
    CHUNK_SIZE = 64 * 1024
    TEMP_PREFIX = "upl"

    async def collect_uploads(self, form: FormData, uploads: Optional[RequestUploads] = None) -> RequestUploads:
        """
        Store every file of a form in temp storage.

        A MAX_FILE_SIZE field limits the file fields that follow it.

        Args:
            form: Parsed multipart form
            uploads: Table to fill; entries are added as soon as each file is stored

        Returns:
            RequestUploads with one entry per file field
        """
        if uploads is None:
            uploads = RequestUploads()
        form_limit = None

        for field_name, value in form.multi_items():
            if not isinstance(value, UploadFile):
                if field_name == self.MAX_FILE_SIZE_FIELD:
                    form_limit = self._parse_form_limit(value)
                continue
            entry = await self._store_file(value, form_limit)
            uploads.add(field_name, entry, accepted=entry.error_code == UploadError.OK)

        return uploads

    async def _store_file(self, file: UploadFile, form_limit: Optional[int]) -> UploadEntry:
        """
        Write one uploaded file to a fresh temp file.

        Args:
            file: Uploaded file from the form
            form_limit: Byte limit declared by the form, if any

        Returns:
            UploadEntry describing the stored file or the failure
        """
        filename = file.filename or ""
        mime_type = file.content_type or ""

        if not filename:
            return UploadEntry(error_code=UploadError.NO_FILE)

        if os.path.splitext(filename)[1].lower() in config.settings.blocked_extension_list:
            logger.warning("Upload %s stopped by extension filter", filename)
            return self._failed(filename, mime_type, UploadError.EXTENSION)

        tmp_dir = config.settings.upload_tmp_dir
        if not os.path.isdir(tmp_dir):
            logger.error("Upload temp directory %s does not exist", tmp_dir)
            return self._failed(filename, mime_type, UploadError.NO_TMP_DIR)

        try:
            fd, temp_path = tempfile.mkstemp(prefix=self.TEMP_PREFIX, dir=tmp_dir)
        except OSError as e:
            logger.error("Could not create temp file in %s: %s", tmp_dir, e)
            return self._failed(filename, mime_type, UploadError.CANT_WRITE)

        max_bytes = config.settings.max_file_size_bytes
        size = 0
        error = UploadError.OK
        try:
            os.close(fd)
            async with aiofiles.open(temp_path, "wb") as out:
                while True:
                    chunk = await file.read(self.CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > max_bytes:
                        error = UploadError.INI_SIZE
                        break
                    if form_limit is not None and size > form_limit:
                        error = UploadError.FORM_SIZE
                        break
                    await out.write(chunk)
        except OSError as e:
            logger.error("Could not write temp file %s: %s", temp_path, e)
            error = UploadError.CANT_WRITE

        if error != UploadError.OK:
            self._discard(temp_path)
            return self._failed(filename, mime_type, error)

        logger.info("Stored upload %s (%d bytes) at %s", filename, size, temp_path)
        return UploadEntry(
            name=filename,
            mime_type=mime_type,
            temp_path=temp_path,
            size=size,
            error_code=UploadError.OK
        )

    def _parse_form_limit(self, value) -> Optional[int]:
        try:
            limit = int(str(value).strip())
        except ValueError:
            return None
        return limit if limit > 0 else None

    @staticmethod
    def _failed(filename: str, mime_type: str, error: UploadError) -> UploadEntry:
        return UploadEntry(name=filename, mime_type=mime_type, error_code=error)

    @staticmethod
    def _discard(path: str) -> None:
        try:
            os.remove(path)
        except OSError:
            logger.warning("Could not remove partial temp file %s", path)
