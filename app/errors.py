import logging
from flask import Blueprint, request
from werkzeug.exceptions import HTTPException
from app.services.store import StoreError
from app.utils.responses import error

errors_bp = Blueprint("errors_bp", __name__)

@errors_bp.app_errorhandler(HTTPException)
def handle_http_exception(e):
    msg = e.description or getattr(e, "name", "HTTP Error")
    return error(msg, status=e.code, code=e.code)

@errors_bp.app_errorhandler(StoreError)
def handle_store_error(e):
    logging.error("Backend request failed on %s %s: %s", request.method, request.path, e)
    return error(
        "The request could not be completed. Please try again.",
        status=502,
        code=502,
    )

@errors_bp.app_errorhandler(Exception)
def handle_unexpected_exception(e):
    logging.exception("Unhandled exception")
    return error(
        "An unexpected error occurred. Please try again later.",
        status=500,
        code=500,
    )
