from flask import Flask
from flask_cors import CORS

from app import config


def create_app(testing: bool = False) -> Flask:
    # Static assets are served from the site root, like the public/ dir of a plain web server
    app = Flask(__name__, static_folder=config.STATIC_DIR, static_url_path="")
    app.config.update(TESTING=testing)
    CORS(app, origins=config.CORS_ORIGINS)

    from app.api.errors import register_error_handlers
    register_error_handlers(app)

    from app.db.mongo import ensure_indexes
    if not testing:
        ensure_indexes(app.logger)

    from app.api import register_api
    register_api(app)

    from app.web import register_web
    register_web(app)

    return app
