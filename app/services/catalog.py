"""Search, filter and summary figures over fetched catalog records.

All matching is case-insensitive. Several predicates combine with AND, and an
empty or ``"all"`` predicate matches everything. A filter that matches
nothing yields an empty list.
"""

from datetime import date, datetime
from typing import Iterable, List, Optional

from models.order import ACTIVE_STATUSES

ORDER_TABS = ("all", "active", "completed")


def _norm(value) -> str:
    return (value or "").strip().lower()


def _is_wildcard(value) -> bool:
    return _norm(value) in ("", "all")


def _contains(haystack, needle: str) -> bool:
    return needle in _norm(haystack)


def filter_suppliers(suppliers: Iterable, q: Optional[str] = None, category: Optional[str] = None,
                     location: Optional[str] = None) -> List:
    """Suppliers matching free text, an exact category and a location fragment.

    ``q`` matches the business name or any category, ``category`` must equal
    one of the supplier's categories and ``location`` is a substring of the
    supplier's address, city or state.
    """
    needle, wanted, place = _norm(q), _norm(category), _norm(location)
    result = []
    for supplier in suppliers:
        categories = [_norm(c) for c in (supplier.categories or [])]
        if needle and not (
            _contains(supplier.business_name, needle)
            or any(needle in c for c in categories)
        ):
            continue
        if not _is_wildcard(category) and wanted not in categories:
            continue
        if not _is_wildcard(location) and not any(
            _contains(part, place) for part in (supplier.address, supplier.city, supplier.state)
        ):
            continue
        result.append(supplier)
    return result


def filter_products(products: Iterable, q: Optional[str] = None, category: Optional[str] = None) -> List:
    needle, wanted = _norm(q), _norm(category)
    result = []
    for product in products:
        if needle and not (
            _contains(product.name, needle)
            or _contains(product.description, needle)
            or _contains(product.category, needle)
        ):
            continue
        if not _is_wildcard(category) and _norm(product.category) != wanted:
            continue
        result.append(product)
    return result


def _order_matches(order, needle: str) -> bool:
    if _contains(order.order_number, needle):
        return True
    supplier = getattr(order, "supplier", None)
    if supplier is not None and _contains(supplier.business_name, needle):
        return True
    for item in order.items or []:
        product = getattr(item, "product", None)
        if product is not None and _contains(product.name, needle):
            return True
    return False


def filter_orders(orders: Iterable, q: Optional[str] = None, tab: Optional[str] = "all") -> List:
    """Orders matching free text, narrowed to one tab.

    The ``active`` tab holds processing and in-transit orders, ``completed``
    holds delivered ones.
    """
    tab = _norm(tab) or "all"
    if tab not in ORDER_TABS:
        raise ValueError(f"Unknown order tab: {tab}")
    needle = _norm(q)
    result = []
    for order in orders:
        if needle and not _order_matches(order, needle):
            continue
        if tab == "active" and order.status not in ACTIVE_STATUSES:
            continue
        if tab == "completed" and order.status != "delivered":
            continue
        result.append(order)
    return result


def order_tab_counts(orders: Iterable) -> dict:
    orders = list(orders)
    return {
        "all": len(orders),
        "active": sum(1 for o in orders if o.status in ACTIVE_STATUSES),
        "completed": sum(1 for o in orders if o.status == "delivered"),
    }


def _placed_on(order) -> Optional[date]:
    created = getattr(order, "created_at", None)
    if isinstance(created, datetime):
        return created.date()
    return created


def vendor_stats(orders: Iterable) -> dict:
    orders = list(orders)
    return {
        "total_orders": len(orders),
        "active_orders": sum(1 for o in orders if o.status in ACTIVE_STATUSES),
        "total_spent": sum(o.total_amount for o in orders if o.status != "cancelled"),
        "suppliers": len({o.supplier_id for o in orders}),
    }


def supplier_stats(supplier, products: Iterable, orders: Iterable, today: Optional[date] = None) -> dict:
    """Figures for a supplier dashboard. ``today`` is a UTC date, matching order timestamps."""
    products, orders = list(products), list(orders)
    today = today or datetime.utcnow().date()
    return {
        "active_products": sum(1 for p in products if p.is_active),
        "total_products": len(products),
        "total_revenue": sum(o.total_amount for o in orders if o.status != "cancelled"),
        "orders_today": sum(1 for o in orders if _placed_on(o) == today),
        "orders_completed": sum(1 for o in orders if o.status == "delivered"),
        "rating": supplier.rating if supplier is not None else None,
    }
