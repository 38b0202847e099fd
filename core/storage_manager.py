"""
Upload Storage Manager

Writes uploaded media and transcripts to the upload directory under a
generated identifier.
"""

import logging
import uuid
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import BinaryIO, Dict, Optional

from core.config import Config
from core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredUpload:
    """Result of storing one upload"""
    id: str
    filename: str
    path: str
    type: str
    original_name: Optional[str] = None
    size: Optional[int] = None

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['originalName'] = data.pop('original_name')
        return {key: value for key, value in data.items() if value is not None}


class StorageManager:
    """Manage files in the local upload directory"""

    URL_PREFIX = '/uploads'
    CHUNK_SIZE = 1024 * 1024

    def __init__(self, upload_dir: Optional[str] = None):
        """
        Args:
            upload_dir: Directory to write into (defaults to Config.get_upload_dir())
        """
        self.upload_dir = Path(upload_dir or Config.get_upload_dir())

    def ensure_upload_dir(self) -> Path:
        """Create the upload directory if needed"""
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    def save_transcript(self, transcript: str) -> StoredUpload:
        """
        Store transcript text as <id>-transcript.txt

        Raises:
            StorageError: If the file cannot be written
        """
        upload_id = str(uuid.uuid4())
        filename = f"{upload_id}-transcript.txt"
        target = self.ensure_upload_dir() / filename

        try:
            target.write_text(transcript, encoding='utf-8')
        except OSError as e:
            logger.error(f"❌ Failed to write transcript {target}: {e}")
            raise StorageError(f"Failed to save transcript: {e}") from e

        logger.info(f"💾 Saved transcript: {target}")
        return StoredUpload(
            id=upload_id,
            filename=filename,
            path=f"{self.URL_PREFIX}/{filename}",
            type='transcript',
        )

    def save_media(self, source: BinaryIO, original_name: str, media_type: str) -> StoredUpload:
        """
        Store an uploaded file as <id>-<type><ext>

        Args:
            source: Readable binary stream with the upload content
            original_name: Client-side filename (its extension is kept)
            media_type: 'video', 'audio' or 'transcript'

        Returns:
            StoredUpload describing the written file

        Raises:
            StorageError: If the file cannot be written or exceeds the size limit
        """
        upload_id = str(uuid.uuid4())
        ext = Path(original_name).suffix
        filename = f"{upload_id}-{media_type}{ext}"
        target = self.ensure_upload_dir() / filename
        max_bytes = Config.MAX_UPLOAD_SIZE_MB * 1024 * 1024

        size = 0
        try:
            with open(target, 'wb') as buffer:
                while True:
                    chunk = source.read(self.CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > max_bytes:
                        raise StorageError(f"File exceeds maximum size of {Config.MAX_UPLOAD_SIZE_MB}MB")
                    buffer.write(chunk)
        except StorageError:
            target.unlink(missing_ok=True)
            logger.warning(f"⚠️ Rejected {media_type} upload {original_name}: over {Config.MAX_UPLOAD_SIZE_MB}MB")
            raise
        except OSError as e:
            target.unlink(missing_ok=True)
            logger.error(f"❌ Failed to write upload {target}: {e}")
            raise StorageError(f"Failed to save file: {e}") from e

        logger.info(f"💾 Saved {media_type} upload: {target} ({size / (1024 * 1024):.2f} MB)")
        return StoredUpload(
            id=upload_id,
            filename=filename,
            path=f"{self.URL_PREFIX}/{filename}",
            type=media_type,
            original_name=original_name,
            size=size,
        )
