from django.http import JsonResponse
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET

from apps.orders.cart import Cart
from apps.tenants.selectors import get_public_tenant
from apps.tenants.serializers import serialize_settings, serialize_tenant

from .selectors import filter_products, get_visible_product, load_storefront, related_products
from .serializers import serialize_banner, serialize_category, serialize_partnership, serialize_product


@ensure_csrf_cookie
@require_GET
def storefront(request, slug: str):
    front = load_storefront(slug)
    search = (request.GET.get("q") or "").strip()
    category_id = (request.GET.get("category") or "").strip() or None
    products = filter_products(front.products, search, category_id)
    cart = Cart(request.session, front.tenant.slug)
    return JsonResponse({
        "tenant": serialize_tenant(front.tenant),
        "settings": serialize_settings(front.settings),
        "categories": [serialize_category(c) for c in front.categories],
        "products": [serialize_product(p) for p in products],
        "featured": [serialize_product(p) for p in front.products if p.featured],
        "banners": [serialize_banner(b) for b in front.banners],
        "partnerships": [serialize_partnership(p) for p in front.partnerships],
        "filters": {"q": search, "category": category_id},
        "cart": {"item_count": cart.item_count},
    })


@ensure_csrf_cookie
@require_GET
def product_detail(request, slug: str, product_id):
    tenant = get_public_tenant(slug)
    product = get_visible_product(tenant, product_id)
    return JsonResponse({
        "tenant": serialize_tenant(tenant),
        "product": serialize_product(product),
        "category": serialize_category(product.category) if product.category else None,
        "related": [serialize_product(p) for p in related_products(product)],
    })
