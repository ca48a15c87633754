import logging
import mimetypes

from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.http import FileResponse, Http404, JsonResponse
from django.views.decorators.http import require_POST

from apps.accounts.decorators import tenant_staff_required
from apps.common.http import flash
from apps.common.images import ALLOWED_FOLDERS, UPLOAD_ROOT, remove_image, store_image
from apps.common.rate_limit import rate_limit, too_many_requests
from apps.common.validators import validate_upload

logger = logging.getLogger(__name__)


def image_public(request, path: str):
    # Only allow files under our upload prefix
    if not path.startswith(f"{UPLOAD_ROOT}/") or ".." in path:
        raise Http404
    if not default_storage.exists(path):
        raise Http404
    f = default_storage.open(path, "rb")
    ctype, _ = mimetypes.guess_type(path)
    resp = FileResponse(f, content_type=ctype or "application/octet-stream")
    resp["Cache-Control"] = "public, max-age=31536000, immutable"
    return resp


@tenant_staff_required
@require_POST
def upload(request):
    tenant = request.tenant
    rl = rate_limit("upload", str(request.user.id), limit=60, window_seconds=60)
    if not rl.allowed:
        return too_many_requests(rl, "Aguarde alguns segundos.")

    folder = (request.POST.get("folder") or "products").strip()
    if folder not in ALLOWED_FOLDERS:
        return flash("Upload inválido", "Pasta de destino inválida.", status=400)
    file_obj = request.FILES.get("file")
    if file_obj is None:
        return flash("Upload inválido", "Selecione uma imagem.", status=400)
    try:
        image_format = validate_upload(file_obj)
    except ValidationError as e:
        logger.warning("Upload rejected tenant_id=%s name=%s reason=%s", tenant.id, file_obj.name, e.messages[0])
        return flash("Upload inválido", e.messages[0])

    stored = store_image(tenant.id, folder, file_obj, image_format)
    logger.info("Upload stored tenant_id=%s path=%s size=%s", tenant.id, stored["path"], file_obj.size)
    return JsonResponse(stored, status=201)


@tenant_staff_required
@require_POST
def delete(request):
    url = (request.POST.get("url") or "").strip()
    if not url:
        return flash("Ops", "Informe a imagem a remover.", status=400)
    if not remove_image(request.tenant.id, url):
        raise Http404
    logger.info("Upload removed tenant_id=%s url=%s", request.tenant.id, url)
    return JsonResponse({"removed": True})
