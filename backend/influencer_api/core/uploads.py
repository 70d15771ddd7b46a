import logging
import os
import shutil
import uuid
from typing import Optional

from fastapi import UploadFile

from .config import settings

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "profileImage"
UPLOAD_URL_PREFIX = "/uploads"


def ensure_upload_dir() -> str:
    os.makedirs(settings.upload_dir, exist_ok=True)
    return settings.upload_dir


def save_upload(file: Optional[UploadFile]) -> str:
    """Write the upload to disk and return its public path, or "" when absent."""
    if file is None or not file.filename:
        return ""

    ext = os.path.splitext(file.filename)[1].lower()
    name = f"{uuid.uuid4().hex}{ext}"
    dest = os.path.join(ensure_upload_dir(), name)

    try:
        with open(dest, "wb") as out:
            shutil.copyfileobj(file.file, out)
    except OSError:
        # no partial files left behind
        if os.path.exists(dest):
            os.remove(dest)
        raise

    logger.info("Stored upload %s as %s", file.filename, name)
    return f"{UPLOAD_URL_PREFIX}/{name}"


def discard_upload(path: str) -> None:
    """Remove a file previously returned by save_upload."""
    if not path.startswith(UPLOAD_URL_PREFIX + "/"):
        return
    name = path[len(UPLOAD_URL_PREFIX) + 1:]
    try:
        os.remove(os.path.join(settings.upload_dir, name))
    except FileNotFoundError:
        pass
