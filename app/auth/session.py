"""The authenticated principal, resolved once per request."""

from dataclasses import dataclass
from typing import Optional, Union


class UnknownRoleError(Exception):
    pass


@dataclass(frozen=True)
class VendorSession:
    user_id: int
    email: str
    name: Optional[str] = None
    role: str = "vendor"


@dataclass(frozen=True)
class SupplierSession:
    user_id: int
    email: str
    name: Optional[str] = None
    role: str = "supplier"


Session = Union[VendorSession, SupplierSession]

_VARIANTS = {
    "vendor": VendorSession,
    "supplier": SupplierSession,
}


def resolve_session(profile) -> Session:
    try:
        variant = _VARIANTS[profile.role]
    except KeyError:
        raise UnknownRoleError(f"Unknown role: {profile.role!r}")
    return variant(user_id=profile.id, email=profile.email, name=profile.name)
