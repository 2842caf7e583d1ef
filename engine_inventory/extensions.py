from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS

# Extensions are created once and initialized in create_app().
db = SQLAlchemy()
login_manager = LoginManager()
cors = CORS()
