from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import MutableMapping

from apps.common.money import to_money

MAX_LINE_QUANTITY = 99
# keeps subtotal plus delivery fee inside Order.total (12 digits, 2 decimals)
MAX_CART_TOTAL = Decimal("99999999.99")


class CartLimitError(ValueError):
    pass


def cart_key(tenant_slug: str) -> str:
    return f"cart:{(tenant_slug or '').strip().lower()}"


@dataclass
class CartLine:
    product_id: str
    name: str
    price: Decimal
    image_url: str
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return to_money(self.price * self.quantity)

    def to_session(self) -> dict:
        data = asdict(self)
        data["price"] = str(self.price)
        return data

    @classmethod
    def from_session(cls, data: dict) -> "CartLine":
        return cls(
            product_id=str(data["product_id"]),
            name=data.get("name", ""),
            price=to_money(data.get("price")),
            image_url=data.get("image_url") or "",
            quantity=int(data.get("quantity", 1)),
        )


class Cart:
    """Per-storefront shopping cart kept in a session-like mapping.

    Lines snapshot name/price/image at the moment they are added; nothing
    here re-reads the catalog. Every mutation writes the whole line list
    back so the session backend notices the change.
    """

    def __init__(self, store: MutableMapping, tenant_slug: str):
        self.store = store
        self.key = cart_key(tenant_slug)

    def _load(self) -> list[CartLine]:
        raw = self.store.get(self.key) or {}
        return [CartLine.from_session(entry) for entry in raw.get("items", [])]

    def _check_limits(self, lines: list[CartLine]) -> None:
        if any(line.quantity > MAX_LINE_QUANTITY for line in lines):
            raise CartLimitError(f"Máximo de {MAX_LINE_QUANTITY} unidades por item.")
        if sum((line.line_total for line in lines), Decimal("0")) > MAX_CART_TOTAL:
            raise CartLimitError("Valor do pedido acima do permitido.")

    def _save(self, lines: list[CartLine]) -> None:
        self._check_limits(lines)
        self.store[self.key] = {"items": [line.to_session() for line in lines]}
        if hasattr(self.store, "modified"):
            self.store.modified = True

    @property
    def items(self) -> list[CartLine]:
        return self._load()

    @property
    def total(self) -> Decimal:
        return to_money(sum((line.line_total for line in self._load()), Decimal("0")))

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._load())

    def is_empty(self) -> bool:
        return not self._load()

    def add(self, product) -> CartLine:
        lines = self._load()
        product_id = str(product.id)
        for line in lines:
            if line.product_id == product_id:
                line.quantity += 1
                self._save(lines)
                return line
        line = CartLine(
            product_id=product_id,
            name=product.name,
            price=to_money(product.price),
            image_url=getattr(product, "image_url", "") or "",
            quantity=1,
        )
        lines.append(line)
        self._save(lines)
        return line

    def update_quantity(self, product_id, quantity: int) -> None:
        if quantity < 1:
            self.remove(product_id)
            return
        lines = self._load()
        for line in lines:
            if line.product_id == str(product_id):
                line.quantity = quantity
                self._save(lines)
                return

    def remove(self, product_id) -> None:
        lines = [line for line in self._load() if line.product_id != str(product_id)]
        self._save(lines)

    def clear(self) -> None:
        if self.key in self.store:
            del self.store[self.key]
            if hasattr(self.store, "modified"):
                self.store.modified = True
