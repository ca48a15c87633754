from __future__ import annotations

import logging
import uuid

from django.conf import settings
from django.contrib.auth import get_user_model, login as auth_login, logout as auth_logout
from django.db import transaction
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.urls import reverse
from django.views.decorators.http import require_http_methods, require_POST

from apps.common.http import flash, form_errors
from apps.common.rate_limit import client_ip, rate_limit, too_many_requests
from apps.tenants.models import Tenant

from .forms import LoginForm, SignupForm

User = get_user_model()
logger = logging.getLogger(__name__)


def _session_payload(user) -> dict:
    tenant = user.tenant
    return {
        "user": {
            "id": str(user.id),
            "email": user.email,
            "name": user.name,
            "role": user.role,
            "tenant": {"id": str(tenant.id), "slug": tenant.slug, "name": tenant.name} if tenant else None,
        },
        "redirect": reverse("dashboard:index"),
    }


@require_http_methods(["GET", "POST"])
def login_view(request: HttpRequest) -> HttpResponse:
    if request.method == "GET":
        # landing spot for login_required redirects
        return JsonResponse({"authenticated": request.user.is_authenticated, "next": request.GET.get("next", "")})

    ip = client_ip(request)
    rl = rate_limit("login", ip, limit=20, window_seconds=60)
    if not rl.allowed:
        return too_many_requests(rl)

    form = LoginForm(request.POST)
    if not form.is_valid():
        return flash("Preencha todos os campos", errors=form_errors(form), status=400)
    email = form.cleaned_data["email"]
    user = User.objects.filter(email__iexact=email).select_related("tenant").first()
    if not user or not user.is_active or not user.check_password(form.cleaned_data["password"]):
        logger.warning("Login failed for email=%s from ip=%s", email, ip)
        return flash("Credenciais inválidas", "Verifique e-mail e senha.", status=400)

    auth_login(request, user)
    logger.info("Login success user_id=%s", user.id)
    return JsonResponse(_session_payload(user))


def _signup_tenant() -> Tenant | None:
    slug = (getattr(settings, "DEMO_STORE_SLUG", "") or "").strip().lower()
    if not slug:
        return None
    return Tenant.objects.filter(slug=slug, is_active=True).first()


@require_POST
def signup_view(request: HttpRequest) -> HttpResponse:
    rl = rate_limit("signup", client_ip(request), limit=20, window_seconds=60)
    if not rl.allowed:
        return too_many_requests(rl)

    form = SignupForm(request.POST)
    if not form.is_valid():
        return flash("Erro ao criar conta", "Revise os campos destacados.", errors=form_errors(form), status=400)

    with transaction.atomic():
        user = User(
            username=f"u_{uuid.uuid4().hex[:12]}",
            email=form.cleaned_data["email"],
            name=form.cleaned_data["name"],
            role="OWNER",
            tenant=_signup_tenant(),
        )
        user.set_password(form.cleaned_data["password"])
        user.save()

    # Auto login after signup
    auth_login(request, user)
    logger.info("Signup user_id=%s tenant_id=%s", user.id, user.tenant_id)
    return JsonResponse(_session_payload(user), status=201)


@require_POST
def logout_view(request: HttpRequest) -> HttpResponse:
    if request.user.is_authenticated:
        logger.info("Logout user_id=%s", request.user.id)
    auth_logout(request)
    return JsonResponse({"redirect": reverse("accounts:login")})
