"""Blueprint registration.

`main` holds login/logout and static image serving; `api` holds the
engine and position endpoints under /api.
"""

from .main import main as main_bp
from .api import api as api_bp


def register_blueprints(app):
    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp, url_prefix="/api")
