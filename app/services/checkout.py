"""Turn a vendor's cart into one order per supplier.

Groups are submitted one after another. Each group is an order insert
followed by a bulk insert of its lines. The first failure stops the run and
nothing already committed is undone, so a run can end with some suppliers
ordered and others not. The cart is cleared only when every group commits.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from app.cart import CartStore, SupplierGroup
from app.services.store import StoreError

logger = logging.getLogger(__name__)


class EmptyCartError(Exception):
    pass


class CheckoutState(str, Enum):
    PENDING_GROUPS = "pending_groups"
    COMMITTING = "committing"
    PARTIAL_FAILURE = "partial_failure"
    FAILED = "failed"
    DONE = "done"


def generate_order_number() -> str:
    """Time-based order number, e.g. ``ORD-1718000000000-3FA2C1``."""
    millis = int(time.time() * 1000)
    return f"ORD-{millis}-{uuid.uuid4().hex[:6].upper()}"


@dataclass
class CheckoutResult:
    state: CheckoutState = CheckoutState.PENDING_GROUPS
    groups: List[SupplierGroup] = field(default_factory=list)
    committed: list = field(default_factory=list)
    # orders whose header was written but whose lines were not
    incomplete: list = field(default_factory=list)
    failed_supplier_id: Optional[int] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.state is CheckoutState.DONE

    @property
    def pending_supplier_ids(self) -> List[int]:
        done = {order.supplier_id for order in self.committed}
        return [g.supplier_id for g in self.groups if g.supplier_id not in done]

    def to_dict(self):
        return {
            "state": self.state.value,
            "orders": [order.to_dict() for order in self.committed],
            "incomplete_orders": [order.order_number for order in self.incomplete],
            "failed_supplier_id": self.failed_supplier_id,
            "pending_supplier_ids": self.pending_supplier_ids if not self.ok else [],
        }


class CheckoutAggregator:
    def __init__(self, store, order_number_factory: Callable[[], str] = generate_order_number):
        self.store = store
        self.order_number_factory = order_number_factory

    def checkout(self, cart: CartStore, vendor_id) -> CheckoutResult:
        if cart.is_empty:
            raise EmptyCartError("Cart is empty")

        result = CheckoutResult(groups=cart.groups())
        result.state = CheckoutState.COMMITTING
        for group in result.groups:
            order = None
            try:
                order = self.store.create_order(
                    vendor_id=vendor_id,
                    supplier_id=group.supplier_id,
                    total_amount=group.total,
                    order_number=self.order_number_factory(),
                    status="pending",
                )
                self.store.create_order_items(_order_lines(order, group))
            except StoreError as e:
                if order is not None:
                    result.incomplete.append(order)
                self._fail(result, group, vendor_id, e)
                return result
            result.committed.append(order)

        cart.clear()
        result.state = CheckoutState.DONE
        logger.info("Vendor %s placed %d order(s)", vendor_id, len(result.committed))
        return result

    def _fail(self, result: CheckoutResult, group: SupplierGroup, vendor_id, error: StoreError):
        result.failed_supplier_id = group.supplier_id
        result.error = error
        if result.committed or result.incomplete:
            result.state = CheckoutState.PARTIAL_FAILURE
        else:
            result.state = CheckoutState.FAILED
        logger.error(
            "Checkout for vendor %s stopped at supplier %s after %d committed order(s): %s",
            vendor_id,
            group.supplier_id,
            len(result.committed),
            error,
        )


def _order_lines(order, group: SupplierGroup) -> List[dict]:
    return [
        {
            "order_id": order.id,
            "product_id": item.product_id,
            "quantity": item.quantity,
            "unit_price": item.price,
            "total_price": item.quantity * item.price,
        }
        for item in group.items
    ]
