from flask import Blueprint, request, current_app, g
from flask_limiter.util import get_remote_address
from werkzeug.security import generate_password_hash, check_password_hash
import logging
from extensions import limiter
from app.version import API_PREFIX
from app.schemas.auth import SignupRequest, LoginRequest, RefreshRequest, ProfileUpdateRequest
from app.utils import (
    ok,
    error,
    internal_error_response,
    transactional,
    validate_schema,
    auth_required,
    create_access_token,
    create_refresh_token,
    decode_token,
    TokenError,
)
from models import db
from models.user import Profile

auth_bp = Blueprint("auth", __name__, url_prefix=API_PREFIX)


def _token_pair(profile):
    return {
        "access_token": create_access_token(profile.id, profile.role),
        "refresh_token": create_refresh_token(profile.id),
        "expires_in": current_app.config["ACCESS_TOKEN_LIFETIME_MIN"] * 60,
    }


@auth_bp.route("/auth/signup", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["SIGNUP_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many sign-ups from this IP",
)
@validate_schema(SignupRequest)
def signup():
    data: SignupRequest = request.validated_data
    if Profile.query.filter_by(email=data.email).first():
        return error("An account with this email already exists", status=409)
    profile = Profile(
        email=data.email,
        password_hash=generate_password_hash(data.password),
        name=data.name,
        role=data.role,
    )
    try:
        with transactional("Failed to create account"):
            db.session.add(profile)
    except Exception:
        return internal_error_response()
    logging.info("Account created: id=%s role=%s", profile.id, profile.role)
    payload = _token_pair(profile)
    payload["user"] = profile.to_dict()
    return ok(payload, message="Account created", status=201)


@auth_bp.route("/auth/login", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["LOGIN_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many logins from this IP",
)
@validate_schema(LoginRequest)
def login():
    data: LoginRequest = request.validated_data
    profile = Profile.query.filter_by(email=data.email).first()
    if not profile or not check_password_hash(profile.password_hash, data.password):
        logging.warning("Failed login attempt for account %s", profile.id if profile else "unknown")
        return error("Invalid email or password", status=401)
    payload = _token_pair(profile)
    payload["user"] = profile.to_dict()
    return ok(payload, message="Signed in")


@auth_bp.route("/auth/refresh", methods=["POST"])
@validate_schema(RefreshRequest)
def refresh_tokens():
    data: RefreshRequest = request.validated_data
    try:
        payload = decode_token(data.refresh_token, expected_type="refresh")
    except TokenError as e:
        return error(str(e), status=401)
    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        return error("invalid token", status=401)
    profile = db.session.get(Profile, user_id)
    if profile is None:
        return error("User not found", status=401)
    return ok(_token_pair(profile))


@auth_bp.route("/logout", methods=["POST"])
def logout_handler():
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer "):
        return error("Token missing", status=401)
    token = auth.split(" ", 1)[1]
    try:
        decode_token(token)
    except TokenError as e:
        return error(str(e), status=401)
    return ok(message="Logged out")


@auth_bp.route("/auth/me", methods=["GET"])
@auth_required
def me():
    return ok(g.profile.to_dict())


@auth_bp.route("/auth/me", methods=["PATCH"])
@auth_required
@validate_schema(ProfileUpdateRequest)
def update_me():
    data: ProfileUpdateRequest = request.validated_data
    profile = g.profile
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(profile, field, value)
    try:
        with transactional("Failed to update profile"):
            pass
    except Exception:
        return internal_error_response()
    return ok(profile.to_dict(), message="Profile updated")
