"""文件上传：接收 data URI，写入上传目录，返回公开访问路径"""
import base64
import binascii
import logging
import uuid
from pathlib import Path
from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException, status

from bizform.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_SUBDIR = "bills"


@router.post("", status_code=status.HTTP_201_CREATED)
async def upload_file(payload: Dict[str, Any] = Body(...)) -> Any:
    file_data = payload.get("fileData")
    file_name = payload.get("fileName")
    if not file_data or not file_name or not isinstance(file_data, str) or not isinstance(file_name, str):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing file data or name")

    encoded = file_data.split(";base64,")[-1]
    try:
        content = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid data URI")
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid data URI")

    unique_name = f"{uuid.uuid4()}{Path(file_name).suffix}"
    upload_dir = Path(settings.UPLOAD_DIR) / UPLOAD_SUBDIR
    try:
        upload_dir.mkdir(parents=True, exist_ok=True)
        (upload_dir / unique_name).write_bytes(content)
    except OSError as e:
        logger.exception(f"文件写入失败: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error uploading file")

    logger.info(f"已上传文件 {file_name} -> {unique_name} ({len(content)} 字节)")
    prefix = settings.UPLOAD_URL_PREFIX.rstrip("/")
    return {"filePath": f"{prefix}/{UPLOAD_SUBDIR}/{unique_name}"}
