"""
Central registry of allowed actions per role.
"""
ROLE_SCOPES = {
    "vendor":   {"manage_cart", "checkout", "view_orders", "rate_order"},
    "supplier": {"manage_profile", "manage_products", "view_orders"},
}

def role_has_scope(role: str, action: str) -> bool:
    scopes = ROLE_SCOPES.get(role, set())
    return "*" in scopes or action in scopes
