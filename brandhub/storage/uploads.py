import logging
import os
import shutil
import time

from fastapi import UploadFile

from brandhub.core import config

logger = logging.getLogger(__name__)


def build_upload_name(filename: str | None) -> str:
    base_name = os.path.basename(filename or "") or "upload"
    return f"{int(time.time() * 1000)}-{base_name}"


def save_upload(upload: UploadFile, directory: str | None = None) -> str:
    """Write ``upload`` under the upload directory and return its path."""
    target_dir = directory or config.UPLOAD_DIR
    os.makedirs(target_dir, exist_ok=True)

    path = os.path.join(target_dir, build_upload_name(upload.filename))
    upload.file.seek(0)
    with open(path, "wb") as buffer:
        shutil.copyfileobj(upload.file, buffer)

    logger.info("Stored upload %s", path)
    return path
