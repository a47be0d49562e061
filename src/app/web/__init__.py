from __future__ import annotations
from flask import Blueprint, current_app

bp = Blueprint("web", __name__)

@bp.get("/")
def index():
    # 404 (as JSON, via the error handlers) when the static dir has no index
    return current_app.send_static_file("index.html")

def register_web(app):
    app.register_blueprint(bp)
