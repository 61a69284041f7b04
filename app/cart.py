"""In-memory vendor cart.

A cart is an ordered list of line items keyed by product id. Quantities never
drop below the line's minimum order quantity: adding merges into an existing
line, updating to a value at or below zero removes the line, and anything
between zero and the minimum is raised to the minimum.

Nothing here is persisted. Carts live in a process-wide registry and are lost
on restart.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class CartItem(BaseModel):
    """One purchase line in a vendor's cart."""

    product_id: int
    product_name: str
    supplier_id: int
    supplier_name: str = ""
    price: float = Field(ge=0)
    unit: str
    quantity: int = 0
    min_quantity: int = Field(default=1, ge=1)
    image_url: Optional[str] = None

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_dict(self):
        data = self.model_dump()
        data["line_total"] = self.line_total
        return data


class SupplierGroup(BaseModel):
    """Cart lines that belong to one supplier and become one order."""

    supplier_id: int
    supplier_name: str = ""
    items: List[CartItem] = []

    @property
    def total(self) -> float:
        return sum(item.line_total for item in self.items)

    def to_dict(self):
        return {
            "supplier_id": self.supplier_id,
            "supplier_name": self.supplier_name,
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
        }


class CartStore:
    """Authoritative list of the items a vendor intends to buy."""

    def __init__(self, items: Optional[List[CartItem]] = None):
        self._items: List[CartItem] = []
        for item in items or []:
            self.add(item, item.quantity or None)

    @property
    def items(self) -> List[CartItem]:
        return list(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self):
        return len(self._items)

    def get(self, product_id: int) -> Optional[CartItem]:
        return next((i for i in self._items if i.product_id == product_id), None)

    def add(self, item: CartItem, quantity: Optional[int] = None) -> CartItem:
        """Add ``item`` or merge it into the existing line for its product.

        Without a quantity (or with zero) the item's minimum quantity is used.
        """
        amount = quantity or item.min_quantity
        existing = self.get(item.product_id)
        if existing is not None:
            self.update_quantity(item.product_id, existing.quantity + amount)
            return existing
        line = item.model_copy(update={"quantity": max(amount, item.min_quantity)})
        self._items.append(line)
        return line

    def update_quantity(self, product_id: int, quantity: int) -> Optional[CartItem]:
        if quantity <= 0:
            self.remove(product_id)
            return None
        line = self.get(product_id)
        if line is None:
            return None
        line.quantity = max(quantity, line.min_quantity)
        return line

    def remove(self, product_id: int) -> None:
        self._items = [i for i in self._items if i.product_id != product_id]

    def clear(self) -> None:
        self._items = []

    def total_price(self) -> float:
        return sum(item.price * item.quantity for item in self._items)

    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def groups(self) -> List[SupplierGroup]:
        """Partition lines by supplier, keeping first-seen supplier order."""
        grouped: Dict[int, SupplierGroup] = {}
        for item in self._items:
            group = grouped.get(item.supplier_id)
            if group is None:
                group = SupplierGroup(
                    supplier_id=item.supplier_id, supplier_name=item.supplier_name
                )
                grouped[item.supplier_id] = group
            group.items.append(item)
        return list(grouped.values())

    def to_dict(self):
        return {
            "items": [item.to_dict() for item in self._items],
            "groups": [group.to_dict() for group in self.groups()],
            "total_price": self.total_price(),
            "item_count": self.item_count(),
        }


class CartRegistry:
    """One cart per vendor, keyed by the vendor's user id."""

    def __init__(self):
        self._carts: Dict[int, CartStore] = {}

    def get(self, vendor_id: int) -> Optional[CartStore]:
        """The vendor's cart if one exists, without creating it."""
        return self._carts.get(vendor_id)

    def for_vendor(self, vendor_id: int) -> CartStore:
        cart = self._carts.get(vendor_id)
        if cart is None:
            cart = CartStore()
            self._carts[vendor_id] = cart
        return cart

    def discard(self, vendor_id: int) -> None:
        self._carts.pop(vendor_id, None)

    def clear(self) -> None:
        self._carts.clear()


carts = CartRegistry()
