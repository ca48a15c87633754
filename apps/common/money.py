from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Coerce a number/string into a Decimal rounded to cents.

    Session payloads carry prices as strings, so this is the single entry
    point for turning them back into arithmetic values.
    """
    if value is None or value == "":
        return Decimal("0.00")
    try:
        return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        raise ValueError(f"invalid money value: {value!r}")


def format_brl(value) -> str:
    """Format a decimal amount as BRL currency (e.g., 1234.5 -> R$ 1.234,50)."""
    try:
        amount = to_money(value)
    except ValueError:
        return str(value)
    s = f"{amount:,.2f}"  # e.g., 1,234.56
    s = s.replace(",", "X").replace(".", ",").replace("X", ".")
    return f"R$ {s}"


def money_payload(value) -> dict:
    amount = to_money(value)
    return {"amount": str(amount), "label": format_brl(amount)}
