import logging

from django.conf import settings
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET, require_POST

from apps.accounts.decorators import tenant_staff_required
from apps.common.http import flash, form_errors

from .forms import BannerForm, CategoryForm, PartnershipForm, ProductForm
from .models import Banner, Category, Partnership, Product
from .serializers import serialize_banner, serialize_category, serialize_partnership, serialize_product

logger = logging.getLogger(__name__)

_DEFAULT_LIMITS = {"categories": 50, "products": 500, "banners": 10, "partnerships": 30}


def _limit(key: str) -> int:
    limits = getattr(settings, "CATALOG_LIMITS", {}) or {}
    return int(limits.get(key, _DEFAULT_LIMITS[key]))


def _limit_reached(model, tenant, key: str) -> bool:
    return model.objects.filter(tenant=tenant).count() >= _limit(key)


def _limit_response(label: str) -> JsonResponse:
    return flash("Limite", f"Máximo de {label} atingido.")


def _invalid(form) -> JsonResponse:
    return flash("Ops", "Revise os campos destacados.", errors=form_errors(form))


def _done(message: str, status: int = 200, **payload) -> JsonResponse:
    payload["flash"] = {"type": "success", "title": "Feito!", "message": message}
    return JsonResponse(payload, status=status)


def _next_sort_order(model, tenant) -> int:
    last = model.objects.filter(tenant=tenant).order_by("-sort_order").first()
    return (last.sort_order + 1) if last else 0


@tenant_staff_required
@require_GET
def menu(request):
    tenant = request.tenant
    categories = Category.objects.filter(tenant=tenant).order_by("sort_order", "created_at")
    products = Product.objects.filter(tenant=tenant).select_related("category").order_by("-created_at")
    return JsonResponse({
        "categories": [serialize_category(c) for c in categories],
        "products": [serialize_product(p, admin=True) for p in products],
        "limits": {key: _limit(key) for key in ("categories", "products")},
    })


# Categories

@tenant_staff_required
@require_POST
def category_create(request):
    tenant = request.tenant
    if _limit_reached(Category, tenant, "categories"):
        return _limit_response("categorias")
    form = CategoryForm(request.POST, instance=Category(tenant=tenant, sort_order=_next_sort_order(Category, tenant)))
    if not form.is_valid():
        return _invalid(form)
    category = form.save()
    logger.info("Category created tenant_id=%s category_id=%s", tenant.id, category.id)
    return _done("Categoria adicionada.", status=201, category=serialize_category(category))


@tenant_staff_required
@require_POST
def category_update(request, category_id):
    category = get_object_or_404(Category, pk=category_id, tenant=request.tenant)
    form = CategoryForm(request.POST, instance=category)
    if not form.is_valid():
        return _invalid(form)
    category = form.save()
    return _done("Categoria atualizada.", category=serialize_category(category))


@tenant_staff_required
@require_POST
def category_delete(request, category_id):
    category = get_object_or_404(Category, pk=category_id, tenant=request.tenant)
    category.delete()
    logger.info("Category deleted tenant_id=%s category_id=%s", request.tenant.id, category_id)
    return _done("Categoria removida.")


@tenant_staff_required
@require_POST
def category_toggle(request, category_id):
    category = get_object_or_404(Category, pk=category_id, tenant=request.tenant)
    category.published = not category.published
    category.save(update_fields=["published", "updated_at"])
    return _done("Categoria atualizada.", category=serialize_category(category))


# Products

@tenant_staff_required
@require_POST
def product_create(request):
    tenant = request.tenant
    if _limit_reached(Product, tenant, "products"):
        return _limit_response("produtos")
    form = ProductForm(request.POST, instance=Product(tenant=tenant), tenant=tenant)
    if not form.is_valid():
        return _invalid(form)
    product = form.save()
    logger.info("Product created tenant_id=%s product_id=%s", tenant.id, product.id)
    return _done("Produto adicionado.", status=201, product=serialize_product(product, admin=True))


@tenant_staff_required
@require_POST
def product_update(request, product_id):
    product = get_object_or_404(Product, pk=product_id, tenant=request.tenant)
    form = ProductForm(request.POST, instance=product, tenant=request.tenant)
    if not form.is_valid():
        return _invalid(form)
    product = form.save()
    return _done("Produto atualizado.", product=serialize_product(product, admin=True))


@tenant_staff_required
@require_POST
def product_delete(request, product_id):
    product = get_object_or_404(Product, pk=product_id, tenant=request.tenant)
    product.delete()
    logger.info("Product deleted tenant_id=%s product_id=%s", request.tenant.id, product_id)
    return _done("Produto removido.")


@tenant_staff_required
@require_POST
def product_toggle(request, product_id):
    product = get_object_or_404(Product, pk=product_id, tenant=request.tenant)
    product.active = not product.active
    product.save(update_fields=["active", "updated_at"])
    return _done("Produto atualizado.", product=serialize_product(product, admin=True))


# Banners

@tenant_staff_required
@require_GET
def banners(request):
    items = Banner.objects.filter(tenant=request.tenant).order_by("sort_order", "created_at")
    return JsonResponse({"banners": [serialize_banner(b) for b in items], "limit": _limit("banners")})


@tenant_staff_required
@require_POST
def banner_create(request):
    tenant = request.tenant
    if _limit_reached(Banner, tenant, "banners"):
        return _limit_response("banners")
    form = BannerForm(request.POST, instance=Banner(tenant=tenant, sort_order=_next_sort_order(Banner, tenant)))
    if not form.is_valid():
        return _invalid(form)
    banner = form.save()
    return _done("Banner adicionado.", status=201, banner=serialize_banner(banner))


@tenant_staff_required
@require_POST
def banner_update(request, banner_id):
    banner = get_object_or_404(Banner, pk=banner_id, tenant=request.tenant)
    form = BannerForm(request.POST, instance=banner)
    if not form.is_valid():
        return _invalid(form)
    banner = form.save()
    return _done("Banner atualizado.", banner=serialize_banner(banner))


@tenant_staff_required
@require_POST
def banner_delete(request, banner_id):
    banner = get_object_or_404(Banner, pk=banner_id, tenant=request.tenant)
    banner.delete()
    return _done("Banner removido.")


@tenant_staff_required
@require_POST
def banner_toggle(request, banner_id):
    banner = get_object_or_404(Banner, pk=banner_id, tenant=request.tenant)
    banner.published = not banner.published
    banner.save(update_fields=["published", "updated_at"])
    return _done("Banner atualizado.", banner=serialize_banner(banner))


# Partnerships

@tenant_staff_required
@require_GET
def partnerships(request):
    items = Partnership.objects.filter(tenant=request.tenant).order_by("sort_order", "created_at")
    return JsonResponse({"partnerships": [serialize_partnership(p) for p in items], "limit": _limit("partnerships")})


@tenant_staff_required
@require_POST
def partnership_create(request):
    tenant = request.tenant
    if _limit_reached(Partnership, tenant, "partnerships"):
        return _limit_response("parcerias")
    form = PartnershipForm(
        request.POST, instance=Partnership(tenant=tenant, sort_order=_next_sort_order(Partnership, tenant))
    )
    if not form.is_valid():
        return _invalid(form)
    partnership = form.save()
    return _done("Parceria adicionada.", status=201, partnership=serialize_partnership(partnership))


@tenant_staff_required
@require_POST
def partnership_update(request, partnership_id):
    partnership = get_object_or_404(Partnership, pk=partnership_id, tenant=request.tenant)
    form = PartnershipForm(request.POST, instance=partnership)
    if not form.is_valid():
        return _invalid(form)
    partnership = form.save()
    return _done("Parceria atualizada.", partnership=serialize_partnership(partnership))


@tenant_staff_required
@require_POST
def partnership_delete(request, partnership_id):
    partnership = get_object_or_404(Partnership, pk=partnership_id, tenant=request.tenant)
    partnership.delete()
    return _done("Parceria removida.")


@tenant_staff_required
@require_POST
def partnership_toggle(request, partnership_id):
    partnership = get_object_or_404(Partnership, pk=partnership_id, tenant=request.tenant)
    partnership.published = not partnership.published
    partnership.save(update_fields=["published", "updated_at"])
    return _done("Parceria atualizada.", partnership=serialize_partnership(partnership))
