from flask import Blueprint
from app.version import API_PREFIX
from app.utils import auth_required, role_required

supplier_bp = Blueprint("supplier", __name__, url_prefix=f"{API_PREFIX}/supplier")


@supplier_bp.before_request
@auth_required
@role_required("supplier")
def _enforce_supplier_role():
    """Ensure the requester is an authenticated supplier."""
    return None

from . import profile  # noqa: E402
from . import products  # noqa: E402
from . import orders  # noqa: E402
