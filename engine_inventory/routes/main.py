# engine_inventory/routes/main.py
from flask import Blueprint, current_app, request, send_from_directory
from flask_login import login_required, login_user, logout_user

from ..extensions import login_manager
from ..http import api_error, api_ok
from ..services import authenticate, load_operator

main = Blueprint("main", __name__)


# ==========================================
# Auth: always JSON
# ==========================================
@login_manager.unauthorized_handler
def _unauthorized():
    return api_error(401, "UNAUTHORIZED", "login required")


@login_manager.user_loader
def load_user(user_id):
    return load_operator(user_id)


@main.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True) or request.form
    username = (data.get("username") or "").strip()
    password = data.get("password") or ""

    operator = authenticate(username, password)
    if not operator:
        current_app.logger.warning("failed login for %r", username)
        return api_error(401, "UNAUTHORIZED", "authentication failed")

    login_user(operator)
    return api_ok({"username": operator.username}, message="authentication successful")


@main.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return api_ok(message="logged out")


# ==========================================
# Stored images
# ==========================================
@main.route("/uploads/<path:filename>")
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
