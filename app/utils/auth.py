from functools import wraps
from flask import request, g
from models import db
from models.user import Profile
from .responses import error
from app.auth.permissions import role_has_scope
from app.auth.session import resolve_session, UnknownRoleError
from .jwt import decode_token, TokenError


def current_session():
    return getattr(g, "session", None)


def auth_required(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        auth = request.headers.get("Authorization", "")
        if not auth:
            return error("Auth header missing", status=401)
        token = auth.split(" ", 1)[1] if auth.startswith("Bearer ") else auth
        try:
            payload = decode_token(token, expected_type="access")
        except TokenError as e:
            return error(str(e), status=401)

        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            return error("invalid token", status=401)
        profile = db.session.get(Profile, user_id)
        if profile is None:
            return error("User not found", status=401)
        try:
            g.session = resolve_session(profile)
        except UnknownRoleError as e:
            return error(str(e), status=403)
        g.profile = profile
        return func(*args, **kwargs)

    return wrapper


def _to_set(obj):
    return set(obj) if isinstance(obj, (list, tuple, set)) else {obj}


def role_required(required):
    """Authorize based on session role or scoped action."""
    required_set = _to_set(required)

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            session = current_session()
            if session is None:
                return error("Role missing", status=403)
            role = session.role
            for entry in required_set:
                if ":" in entry:
                    r, action = entry.split(":", 1)
                    if role == r and role_has_scope(role, action):
                        break
                else:
                    if role == entry:
                        break
            else:
                return error("Forbidden", status=403)
            return fn(*args, **kwargs)

        return wrapper

    return decorator
