"""Image store: uploaded engine photos on the local filesystem."""

import os
import uuid

from flask import current_app
from werkzeug.utils import secure_filename

from ..errors import StorageError, ValidationError

# prefix stored in Equipment.image_path
UPLOAD_PREFIX = "uploads"


def _upload_root() -> str:
    upload_root = current_app.config.get("UPLOAD_FOLDER")
    if not upload_root:
        # 讓錯誤早一點爆，方便排查設定問題
        raise RuntimeError("UPLOAD_FOLDER is not configured in app.config")
    return upload_root


def init_upload_folder() -> None:
    """初始化上傳資料夾（避免第一次上傳時才 mkdir）"""
    os.makedirs(_upload_root(), exist_ok=True)


def has_upload(file_storage) -> bool:
    """True when the request carried a real file, not an empty part or "null"."""
    if file_storage is None:
        return False
    filename = getattr(file_storage, "filename", "") or ""
    return bool(filename) and filename != "null"


def image_extension(filename: str) -> str:
    # the stem may be non-ASCII ("фото.jpg"); only the extension is kept
    raw_ext = os.path.splitext(filename or "")[1].lstrip(".").lower()
    if not raw_ext:
        return ""
    ext = secure_filename(raw_ext)
    allowed = current_app.config.get("ALLOWED_IMAGE_EXTENSIONS")
    if ext != raw_ext or (allowed and ext not in allowed):
        raise ValidationError(f"unsupported image type: .{raw_ext}", field="file")
    return ext


def store_image(file_storage) -> str:
    """Write the upload as <uuid>.<ext> and return "uploads/<uuid>.<ext>"."""
    ext = image_extension(file_storage.filename)
    stored = uuid.uuid4().hex + (f".{ext}" if ext else "")
    path = os.path.join(_upload_root(), stored)

    try:
        os.makedirs(_upload_root(), exist_ok=True)
        file_storage.seek(0)
        with open(path, "wb") as f:
            f.write(file_storage.read())
    except OSError as e:
        raise StorageError(f"could not store image: {e}", field="file") from e

    current_app.logger.info("stored image %s", stored)
    return f"{UPLOAD_PREFIX}/{stored}"


def resolve_image_path(relative_path: str) -> str:
    # only the basename is trusted; the file always lives directly in UPLOAD_FOLDER
    return os.path.join(_upload_root(), os.path.basename(relative_path))


def delete_image(relative_path: str | None) -> bool:
    """Remove a stored image. A missing file is not an error.

    Returns True when a file was actually removed. OSError from the
    filesystem propagates; callers doing best-effort cleanup catch it.
    """
    if not relative_path or relative_path == "null":
        return False
    path = resolve_image_path(relative_path)
    if not os.path.exists(path):
        current_app.logger.info("image already gone: %s", path)
        return False
    os.remove(path)
    current_app.logger.info("deleted image %s", path)
    return True


def discard_image(relative_path: str | None) -> None:
    """Best-effort delete: failures are logged, never raised."""
    try:
        delete_image(relative_path)
    except OSError:
        current_app.logger.warning("could not delete image %s", relative_path, exc_info=True)
