import pytest
from django.contrib.auth import get_user_model

from apps.catalog.models import Banner, Category, Partnership, Product

User = get_user_model()


@pytest.mark.django_db
def test_admin_requires_login(client):
    r = client.get("/admin/menu")
    assert r.status_code == 302
    assert r.headers["Location"].startswith("/admin/login")


@pytest.mark.django_db
def test_admin_requires_tenant_link(client):
    lonely = User.objects.create_user(username="u_lonely", email="sem@example.com", password="pwd123")
    client.force_login(lonely)
    assert client.get("/admin/menu").status_code == 403
    assert client.get("/admin").status_code == 403


@pytest.mark.django_db
def test_category_crud(staff_client, tenant):
    r = staff_client.post("/admin/menu/categories", {"name": "  Lanches ", "published": "on"})
    assert r.status_code == 201
    cat = Category.objects.get(tenant=tenant)
    assert cat.name == "Lanches"
    assert cat.published is True

    r = staff_client.post(f"/admin/menu/categories/{cat.id}", {"name": "Sanduíches", "published": "on", "sort_order": "3"})
    assert r.status_code == 200
    cat.refresh_from_db()
    assert (cat.name, cat.sort_order) == ("Sanduíches", 3)

    r = staff_client.post(f"/admin/menu/categories/{cat.id}/toggle")
    assert r.json()["category"]["published"] is False

    assert staff_client.post("/admin/menu/categories", {"name": "   "}).status_code == 422

    assert staff_client.post(f"/admin/menu/categories/{cat.id}/delete").status_code == 200
    assert not Category.objects.filter(pk=cat.pk).exists()


@pytest.mark.django_db
def test_product_publish_now_sets_and_keeps_timestamp(staff_client, tenant, category):
    r = staff_client.post(
        "/admin/menu/products",
        {"name": "X-Burger", "price": "22.90", "category": str(category.id), "active": "on", "publish_now": "on"},
    )
    assert r.status_code == 201
    product = Product.objects.get(tenant=tenant)
    first_published = product.published_at
    assert first_published is not None
    assert r.json()["product"]["visible"] is True

    r = staff_client.post(
        f"/admin/menu/products/{product.id}",
        {"name": "X-Burger Duplo", "price": "29.90", "active": "on", "publish_now": "on"},
    )
    assert r.status_code == 200
    product.refresh_from_db()
    assert product.published_at == first_published
    assert product.category_id is None

    staff_client.post(f"/admin/menu/products/{product.id}", {"name": "X-Burger Duplo", "price": "29.90", "active": "on"})
    product.refresh_from_db()
    assert product.published_at is None


@pytest.mark.django_db
def test_product_toggle_hides_from_storefront(staff_client, client, tenant, make_product):
    product = make_product()
    r = staff_client.post(f"/admin/menu/products/{product.id}/toggle")
    assert r.json()["product"]["active"] is False
    assert client.get(f"/r/{tenant.slug}").json()["products"] == []


@pytest.mark.django_db
def test_product_rejects_foreign_category(staff_client, other_tenant):
    foreign = Category.objects.create(tenant=other_tenant, name="Pizzas")
    r = staff_client.post("/admin/menu/products", {"name": "Calzone", "price": "30", "category": str(foreign.id)})
    assert r.status_code == 422
    assert "category" in r.json()["errors"]


@pytest.mark.django_db
def test_product_rejects_negative_price(staff_client):
    r = staff_client.post("/admin/menu/products", {"name": "Bug", "price": "-1"})
    assert r.status_code == 422
    assert Product.objects.count() == 0


@pytest.mark.django_db
def test_image_urls_without_scheme_default_to_https(staff_client, tenant):
    r = staff_client.post(
        "/admin/menu/products",
        {"name": "Suco", "price": "7.00", "active": "on", "image_url": "cdn.example.com/suco.png"},
    )
    assert r.status_code == 201
    assert Product.objects.get(tenant=tenant).image_url == "https://cdn.example.com/suco.png"

    r = staff_client.post("/admin/partnerships/new", {"name": "Feira Local", "logo_url": "cdn.example.com/feira.png"})
    assert r.status_code == 201
    assert Partnership.objects.get(tenant=tenant).logo_url == "https://cdn.example.com/feira.png"


@pytest.mark.django_db
def test_other_tenant_objects_are_404(staff_client, other_tenant, make_product):
    foreign = make_product("Pizza", owner=other_tenant)
    assert staff_client.post(f"/admin/menu/products/{foreign.id}/delete").status_code == 404
    assert staff_client.post(f"/admin/menu/products/{foreign.id}/toggle").status_code == 404
    assert Product.objects.filter(pk=foreign.pk, active=True).exists()


@pytest.mark.django_db
def test_menu_lists_hidden_products(staff_client, make_product):
    make_product("Visível")
    make_product("Rascunho", published=False)
    data = staff_client.get("/admin/menu").json()
    assert {p["name"] for p in data["products"]} == {"Visível", "Rascunho"}


@pytest.mark.django_db
def test_catalog_limits(staff_client, settings, tenant):
    settings.CATALOG_LIMITS = {"categories": 1, "products": 1, "banners": 1, "partnerships": 1}
    assert staff_client.post("/admin/menu/categories", {"name": "A", "published": "on"}).status_code == 201
    r = staff_client.post("/admin/menu/categories", {"name": "B", "published": "on"})
    assert r.status_code == 422
    assert r.json()["flash"]["title"] == "Limite"
    assert Category.objects.filter(tenant=tenant).count() == 1


@pytest.mark.django_db
def test_banner_crud(staff_client, tenant):
    r = staff_client.post(
        "/admin/banners/new", {"title": "Promo", "image_url": "https://cdn.example.com/b.png", "published": "on"}
    )
    assert r.status_code == 201
    banner = Banner.objects.get(tenant=tenant)
    assert staff_client.post(f"/admin/banners/{banner.id}/toggle").json()["banner"]["published"] is False
    assert [b["title"] for b in staff_client.get("/admin/banners").json()["banners"]] == ["Promo"]
    assert staff_client.post("/admin/banners/new", {"title": "Sem imagem"}).status_code == 422
    assert staff_client.post(f"/admin/banners/{banner.id}/delete").status_code == 200
    assert not Banner.objects.exists()


@pytest.mark.django_db
def test_partnership_crud(staff_client, tenant):
    r = staff_client.post(
        "/admin/partnerships/new",
        {"name": "Padaria Lua", "external_link": "https://padarialua.example.com", "published": "on"},
    )
    assert r.status_code == 201
    partnership = Partnership.objects.get(tenant=tenant)
    r = staff_client.post(
        f"/admin/partnerships/{partnership.id}", {"name": "Padaria Sol", "published": "on", "sort_order": "2"}
    )
    assert r.json()["partnership"]["name"] == "Padaria Sol"
    assert staff_client.post(f"/admin/partnerships/{partnership.id}/toggle").json()["partnership"]["published"] is False
    assert staff_client.get("/admin/partnerships").json()["partnerships"][0]["sort_order"] == 2
    assert staff_client.post(f"/admin/partnerships/{partnership.id}/delete").status_code == 200
