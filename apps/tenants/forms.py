import json

from django import forms
from django.core.exceptions import ValidationError

from apps.common.phone import to_e164
from apps.common.validators import validate_hhmm

from .models import StoreSettings, Tenant, WEEKDAYS


class TenantForm(forms.ModelForm):
    class Meta:
        model = Tenant
        fields = ["name", "phone", "address"]

    def clean_name(self):
        name = (self.cleaned_data.get("name") or "").strip()
        if not name:
            raise ValidationError("Informe o nome da loja.")
        return name

    def clean_phone(self):
        raw = (self.cleaned_data.get("phone") or "").strip()
        if not raw:
            return ""
        try:
            return to_e164(raw)
        except ValueError as e:
            raise ValidationError(str(e))


def parse_opening_hours(raw) -> dict:
    """Validate an opening-hours payload (dict or JSON text).

    Keys must be known weekdays; each value is {"open": "HH:MM", "close": "HH:MM"}.
    Empty input means no hours configured.
    """
    if raw in (None, ""):
        return {}
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            raise ValidationError("Horários em formato inválido.")
    if not isinstance(raw, dict):
        raise ValidationError("Horários em formato inválido.")
    known = {key for key, _label in WEEKDAYS}
    cleaned = {}
    for day, window in raw.items():
        if day not in known:
            raise ValidationError(f"Dia da semana desconhecido: {day}.")
        if not isinstance(window, dict):
            raise ValidationError(f"Horário inválido para {day}.")
        open_at = validate_hhmm(window.get("open", ""))
        close_at = validate_hhmm(window.get("close", ""))
        cleaned[day] = {"open": open_at, "close": close_at}
    return cleaned


class StoreSettingsForm(forms.ModelForm):
    opening_hours = forms.CharField(required=False)

    class Meta:
        model = StoreSettings
        fields = ["is_open", "delivery_fee", "pickup_enabled", "opening_hours", "theme_primary", "theme_secondary"]

    def clean_opening_hours(self):
        return parse_opening_hours(self.cleaned_data.get("opening_hours"))
