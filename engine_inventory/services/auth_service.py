"""Single shared account checked against the configured login/password."""

from flask import current_app
from werkzeug.security import check_password_hash, generate_password_hash

from ..models import Operator


def _password_hash() -> str:
    # hashed once per app; the config only holds the plain value
    ext = current_app.extensions.setdefault("engine_inventory", {})
    if "password_hash" not in ext:
        ext["password_hash"] = generate_password_hash(current_app.config["ADMIN_PASSWORD"])
    return ext["password_hash"]


def authenticate(username: str, password: str) -> Operator | None:
    if not username or not password:
        return None
    if username != current_app.config["ADMIN_LOGIN"]:
        return None
    if not check_password_hash(_password_hash(), password):
        return None
    return Operator(username)


def load_operator(user_id: str) -> Operator | None:
    if user_id == current_app.config["ADMIN_LOGIN"]:
        return Operator(user_id)
    return None
