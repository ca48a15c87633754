from django.conf import settings
from django.core.exceptions import ValidationError
from PIL import Image, UnidentifiedImageError


def validate_max_size(file, max_bytes: int):
    size = getattr(file, "size", 0) or 0
    if size > max_bytes:
        mb = max_bytes // (1024 * 1024)
        raise ValidationError(f"Imagem muito grande (máx. {mb}MB).")


def validate_mime(file, prefix: str = "image/"):
    mime = getattr(file, "content_type", "") or ""
    if not mime.startswith(prefix):
        raise ValidationError("Apenas imagens são permitidas.")


def verify_image(file) -> str:
    """Open the file with Pillow and return the detected format (e.g. "PNG")."""
    pos = file.tell()
    try:
        img = Image.open(file)
        fmt = img.format or ""
        img.verify()
    except (UnidentifiedImageError, OSError):
        raise ValidationError("Imagem corrompida ou inválida.")
    finally:
        file.seek(pos)
    return fmt


def validate_upload(file) -> str:
    validate_max_size(file, getattr(settings, "MAX_UPLOAD_BYTES", 5 * 1024 * 1024))
    validate_mime(file)
    return verify_image(file)


def validate_hhmm(value) -> str:
    if not isinstance(value, str):
        raise ValidationError("Horário deve estar no formato HH:MM.")
    raw = value.strip()
    parts = raw.split(":")
    if len(parts) != 2 or not all(p.isdigit() and len(p) == 2 for p in parts):
        raise ValidationError("Horário deve estar no formato HH:MM.")
    hh, mm = int(parts[0]), int(parts[1])
    if hh > 23 or mm > 59:
        raise ValidationError("Horário inválido.")
    return raw
