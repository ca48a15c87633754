import pytest
from django.contrib.auth import get_user_model

from apps.tenants.models import Tenant

User = get_user_model()


@pytest.mark.django_db
def test_login_happy_path(client, user):
    r = client.post("/admin/login", {"email": "DONO@example.com", "password": "pwd123"})
    assert r.status_code == 200
    body = r.json()
    assert body["user"]["tenant"]["slug"] == "cantina-da-praca"
    assert body["redirect"] == "/admin"
    assert client.get("/admin").status_code == 200


@pytest.mark.django_db
def test_login_wrong_password(client, user):
    r = client.post("/admin/login", {"email": "dono@example.com", "password": "errada"})
    assert r.status_code == 400
    assert r.json()["flash"]["title"] == "Credenciais inválidas"
    assert client.get("/admin").status_code == 302


@pytest.mark.django_db
def test_login_is_rate_limited(client, user):
    for _ in range(20):
        client.post("/admin/login", {"email": "dono@example.com", "password": "errada"})
    r = client.post("/admin/login", {"email": "dono@example.com", "password": "pwd123"})
    assert r.status_code == 429
    assert int(r["Retry-After"]) >= 1


@pytest.mark.django_db
def test_signup_creates_owner_and_logs_in(client):
    demo = Tenant.objects.create(slug="demo", name="Loja Demo")
    r = client.post(
        "/admin/signup", {"name": "Carla Dias", "email": "Carla@Example.com", "password": "Tomate-Seco-2024"}
    )
    assert r.status_code == 201
    created = User.objects.get(email="carla@example.com")
    assert created.role == "OWNER"
    assert created.name == "Carla Dias"
    assert created.tenant == demo
    assert client.get("/admin").status_code == 200


@pytest.mark.django_db
def test_signup_duplicate_email(client, user):
    r = client.post("/admin/signup", {"name": "Outro", "email": "dono@example.com", "password": "Tomate-Seco-2024"})
    assert r.status_code == 400
    assert "email" in r.json()["errors"]
    assert User.objects.filter(email="dono@example.com").count() == 1


@pytest.mark.django_db
def test_logout(staff_client):
    r = staff_client.post("/admin/logout")
    assert r.status_code == 200
    assert staff_client.get("/admin").status_code == 302


def test_landing(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["links"] == {"admin_login": "/admin/login", "demo_store": "/r/demo"}
