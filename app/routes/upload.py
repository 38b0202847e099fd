"""
API routes for media and transcript uploads
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from app.dependencies import error_response
from core.config import Config
from core.exceptions import StorageError
from core.storage_manager import StorageManager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload")
async def upload_content(
    file: Optional[UploadFile] = File(None),
    type: Optional[str] = Form(None),
    transcript: Optional[str] = Form(None)
):
    """
    Store an uploaded video/audio file or pasted transcript text

    Args:
        file: The uploaded media file
        type: 'video', 'audio' or 'transcript'
        transcript: Transcript text (used when type is 'transcript')

    Returns:
        Generated id, stored filename and public path
    """
    storage = StorageManager()

    try:
        if type == 'transcript' and transcript:
            stored = await asyncio.to_thread(storage.save_transcript, transcript)
            return {"success": True, **stored.to_dict()}

        if file is None or not file.filename:
            return error_response("No file provided")

        if type not in Config.UPLOAD_TYPES:
            return error_response(
                f"Invalid type: {type}. Supported types: {', '.join(Config.UPLOAD_TYPES)}"
            )

        logger.info(f"📤 [UPLOAD] Receiving {type} upload: {file.filename}")
        stored = await asyncio.to_thread(storage.save_media, file.file, file.filename, type)
    except StorageError as e:
        return error_response(str(e), status_code=500)

    return {"success": True, **stored.to_dict()}


@router.get("/upload")
async def upload_usage():
    """Usage information for the upload endpoint"""
    return {
        "message": "Upload API - POST a file to upload",
        "supportedTypes": list(Config.UPLOAD_TYPES),
        "maxSize": f"{Config.MAX_UPLOAD_SIZE_MB}MB",
    }
