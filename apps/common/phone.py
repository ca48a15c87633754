import phonenumbers


def to_e164(raw: str, default_region: str = "BR") -> str:
    try:
        n = phonenumbers.parse(raw, default_region)
    except phonenumbers.NumberParseException:
        raise ValueError("Telefone inválido")
    if not phonenumbers.is_valid_number(n):
        raise ValueError("Telefone inválido")
    return phonenumbers.format_number(n, phonenumbers.PhoneNumberFormat.E164)


def digits_only(value: str) -> str:
    return "".join(ch for ch in (value or "") if ch.isdigit())
