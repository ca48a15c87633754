import pytest

from apps.orders.transitions import transition_order


@pytest.mark.django_db
def test_tracking_by_code_is_case_insensitive(client, make_order):
    order = make_order()
    r = client.get(f"/track/{order.code.lower()}")
    assert r.status_code == 200
    data = r.json()
    assert data["order"]["status"] == "PENDING"
    assert data["order"]["status_label"] == "Pedido recebido"
    assert data["poll"] is True
    assert data["poll_interval_seconds"] == 5
    assert data["order"]["total"]["amount"] == "30.00"
    assert [s["done"] for s in data["order"]["steps"]] == [True, False, False]


@pytest.mark.django_db
def test_tracking_stops_polling_when_terminal(client, make_order):
    order = make_order()
    transition_order(order, to_status="PREPARING", expected_status="PENDING")
    data = client.get(f"/track/{order.code}").json()
    assert data["poll"] is True
    assert [h["status"] for h in data["order"]["history"]] == ["PENDING", "PREPARING"]

    transition_order(order, to_status="CANCELED", expected_status="PREPARING")
    data = client.get(f"/track/{order.code}").json()
    assert data["poll"] is False
    assert data["order"]["terminal"] is True
    assert data["order"]["canceled"] is True
    assert data["order"]["status_label"] == "Pedido cancelado"


@pytest.mark.django_db
def test_tracking_unknown_code_or_inactive_store(client, make_order, tenant):
    assert client.get("/track/ZZZZZZ").status_code == 404
    order = make_order()
    tenant.is_active = False
    tenant.save()
    assert client.get(f"/track/{order.code}").status_code == 404
