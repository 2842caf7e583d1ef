import os

from flask import Flask

from .config import Config
from .extensions import cors, db, login_manager


def create_app(config_object=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object or Config)

    # instance folder
    os.makedirs(app.instance_path, exist_ok=True)

    # ===== 資料庫路徑：預設 instance/engines.db =====
    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        db_path = os.path.join(app.instance_path, "engines.db")
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{db_path}"

    # ===== 照片統一放 instance/uploads =====
    if not app.config.get("UPLOAD_FOLDER"):
        app.config["UPLOAD_FOLDER"] = os.path.join(app.instance_path, "uploads")

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ORIGINS"])

    # import models so SQLAlchemy registers tables
    from . import models  # noqa

    # register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # register error handlers
    from .errors import register_error_handlers
    register_error_handlers(app)

    # API 回應不快取
    @app.after_request
    def add_header(response):
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
        return response

    with app.app_context():
        db.create_all()

        from .services import init_upload_folder
        init_upload_folder()

        if app.config["ADMIN_PASSWORD"] == "admin" and not app.testing:
            app.logger.warning("ADMIN_PASSWORD is the default; set it in the environment")

    return app
