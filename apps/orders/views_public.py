import logging
import uuid

from django.db import DatabaseError
from django.http import Http404, HttpResponseBadRequest, JsonResponse
from django.urls import reverse
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from apps.catalog.selectors import get_visible_product
from apps.common.http import flash, form_errors
from apps.common.money import money_payload
from apps.common.urls import tracking_url
from apps.tenants.selectors import get_public_tenant
from apps.tenants.serializers import serialize_tenant

from .cart import Cart, CartLimitError
from .checkout import CheckoutForm, EmptyCartError, place_order, summarize
from .selectors import get_order_by_code
from .serializers import serialize_cart, serialize_cart_line, serialize_order

logger = logging.getLogger(__name__)


def _parse_uuid(raw):
    try:
        return uuid.UUID(str(raw or "").strip())
    except ValueError:
        return None


def _cart_response(tenant, cart: Cart, **extra) -> JsonResponse:
    payload = {"tenant": serialize_tenant(tenant), "cart": serialize_cart(cart)}
    payload.update(extra)
    return JsonResponse(payload)


@ensure_csrf_cookie
@require_GET
def cart_detail(request, slug: str):
    tenant = get_public_tenant(slug)
    return _cart_response(tenant, Cart(request.session, tenant.slug))


@require_POST
def cart_add(request, slug: str):
    tenant = get_public_tenant(slug)
    product_id = _parse_uuid(request.POST.get("product_id"))
    if product_id is None:
        return HttpResponseBadRequest("product_id required")
    try:
        product = get_visible_product(tenant, product_id)
    except Http404:
        return flash("Produto indisponível", "Este produto não está mais disponível.", status=404)
    cart = Cart(request.session, tenant.slug)
    try:
        cart.add(product)
    except CartLimitError as e:
        return flash("Limite do carrinho", str(e))
    return _cart_response(
        tenant, cart, flash={"type": "success", "title": "Adicionado!", "message": f"{product.name} no carrinho."}
    )


@require_POST
def cart_update(request, slug: str):
    tenant = get_public_tenant(slug)
    product_id = _parse_uuid(request.POST.get("product_id"))
    try:
        quantity = int(request.POST.get("quantity", ""))
    except ValueError:
        quantity = None
    if product_id is None or quantity is None:
        return HttpResponseBadRequest("product_id and quantity required")
    cart = Cart(request.session, tenant.slug)
    try:
        cart.update_quantity(product_id, quantity)
    except CartLimitError as e:
        return flash("Limite do carrinho", str(e))
    return _cart_response(tenant, cart)


@require_POST
def cart_remove(request, slug: str):
    tenant = get_public_tenant(slug)
    product_id = _parse_uuid(request.POST.get("product_id"))
    if product_id is None:
        return HttpResponseBadRequest("product_id required")
    cart = Cart(request.session, tenant.slug)
    cart.remove(product_id)
    return _cart_response(tenant, cart)


@require_POST
def cart_clear(request, slug: str):
    tenant = get_public_tenant(slug)
    cart = Cart(request.session, tenant.slug)
    cart.clear()
    return _cart_response(tenant, cart)


@ensure_csrf_cookie
@require_http_methods(["GET", "POST"])
def checkout(request, slug: str):
    tenant = get_public_tenant(slug)
    cart = Cart(request.session, tenant.slug)

    if request.method == "GET":
        summary = summarize(tenant, cart)
        return JsonResponse({
            "tenant": serialize_tenant(tenant),
            "empty": not summary.lines,
            "items": [serialize_cart_line(line) for line in summary.lines],
            "subtotal": money_payload(summary.subtotal),
            "delivery_fee": money_payload(summary.delivery_fee),
            "total": money_payload(summary.total),
        })

    form = CheckoutForm(request.POST)
    if not form.is_valid():
        return flash("Preencha todos os campos", "Revise os dados de entrega.", errors=form_errors(form))
    try:
        order = place_order(tenant=tenant, cart=cart, details=form.cleaned_data)
    except EmptyCartError:
        return flash("Carrinho vazio", "Adicione itens antes de finalizar.")
    except DatabaseError:
        logger.exception("Checkout failed tenant_id=%s", tenant.id)
        return flash("Não foi possível enviar o pedido", "Tente novamente.", status=503)

    return JsonResponse(
        {
            "order": serialize_order(order),
            "confirmation_url": reverse("orders_public:confirmation", args=[tenant.slug, order.code]),
            "tracking_url": tracking_url(order.code),
            "flash": {"type": "success", "title": "Pedido enviado!", "message": f"Seu código é #{order.code}."},
        },
        status=201,
    )


@require_GET
def confirmation(request, slug: str, code: str):
    tenant = get_public_tenant(slug)
    order = get_order_by_code(code, tenant=tenant)
    if order is None:
        raise Http404()
    return JsonResponse({
        "tenant": serialize_tenant(tenant),
        "order": serialize_order(order, detail=True),
        "tracking_url": tracking_url(order.code),
    })
