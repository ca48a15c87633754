from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from apps.common.codes import generate_unique_code, normalize_code
from apps.common.images import build_upload_path, path_from_url
from apps.common.money import format_brl, money_payload, to_money
from apps.common.phone import to_e164
from apps.common.validators import validate_hhmm
from apps.tenants.forms import parse_opening_hours


def test_money_helpers():
    assert to_money("10.005") == Decimal("10.01")
    assert to_money(None) == Decimal("0.00")
    assert format_brl(Decimal("1234.5")) == "R$ 1.234,50"
    assert money_payload("5.5") == {"amount": "5.50", "label": "R$ 5,50"}
    with pytest.raises(ValueError):
        to_money("abc")


def test_phone_normalization():
    assert to_e164("(11) 98765-1234") == "+5511987651234"
    with pytest.raises(ValueError):
        to_e164("123")


def test_codes():
    assert normalize_code("  #ab12cd ") == "AB12CD"
    seen = iter([True, True, False])
    code = generate_unique_code(length=6, exists=lambda _c: next(seen))
    assert len(code) == 6 and code == code.upper()
    with pytest.raises(RuntimeError):
        generate_unique_code(length=6, exists=lambda _c: True, max_attempts=3)


def test_hhmm():
    assert validate_hhmm("08:30") == "08:30"
    for bad in ("8:30", "24:00", "12:60", "", "aa:bb", None, 9, ["08:30"]):
        with pytest.raises(ValidationError):
            validate_hhmm(bad)


def test_opening_hours_parsing():
    assert parse_opening_hours("") == {}
    assert parse_opening_hours({"sunday": {"open": "10:00", "close": "14:00", "extra": 1}}) == {
        "sunday": {"open": "10:00", "close": "14:00"}
    }
    with pytest.raises(ValidationError):
        parse_opening_hours("[1, 2]")


def test_upload_paths():
    path = build_upload_path("t1", "banners", "Foto.JPEG", "JPEG")
    assert path.startswith("tenants/t1/banners/")
    assert path.endswith(".jpg")
    assert path_from_url("https://cdn.example.com/media/p/tenants/t1/banners/a.jpg") == "tenants/t1/banners/a.jpg"
    assert path_from_url("https://evil.example.com/other/a.jpg") == ""
