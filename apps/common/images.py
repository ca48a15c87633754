import secrets
from datetime import datetime
from pathlib import PurePosixPath
from urllib.parse import urlparse

from django.core.files.storage import default_storage
from django.utils import timezone

UPLOAD_ROOT = "tenants"
ALLOWED_FOLDERS = {"products", "banners", "partnerships", "logos"}
_FORMAT_EXT = {"JPEG": "jpg", "PNG": "png", "GIF": "gif", "WEBP": "webp"}


def tenant_prefix(tenant_id) -> str:
    return f"{UPLOAD_ROOT}/{tenant_id}/"


def build_upload_path(tenant_id, folder: str, filename: str, image_format: str = "", now: datetime | None = None) -> str:
    now = now or timezone.now()
    ext = _FORMAT_EXT.get((image_format or "").upper())
    if not ext:
        ext = (PurePosixPath(filename or "").suffix.lstrip(".") or "bin").lower()
    token = secrets.token_hex(4)
    return f"{tenant_prefix(tenant_id)}{folder}/{int(now.timestamp() * 1000)}-{token}.{ext}"


def store_image(tenant_id, folder: str, file_obj, image_format: str = "") -> dict:
    path = build_upload_path(tenant_id, folder, getattr(file_obj, "name", ""), image_format)
    saved = default_storage.save(path, file_obj)
    return {"path": saved, "url": default_storage.url(saved)}


def path_from_url(url: str) -> str:
    """Turn a public storage URL back into a storage path (relative to MEDIA root)."""
    parsed = urlparse(url or "")
    path = parsed.path or ""
    idx = path.find(f"/{UPLOAD_ROOT}/")
    if idx < 0:
        return ""
    return path[idx + 1:]


def remove_image(tenant_id, url: str) -> bool:
    path = path_from_url(url)
    if not path or not path.startswith(tenant_prefix(tenant_id)) or ".." in path:
        return False
    if not default_storage.exists(path):
        return False
    default_storage.delete(path)
    return True
