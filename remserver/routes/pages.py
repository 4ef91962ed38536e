from flask import Blueprint, jsonify

bp = Blueprint("pages", __name__)


@bp.get("/")
def index():
    return jsonify({
        "name": "REM Server",
        "description": "Mock REST API over session-scoped JSON datasets",
        "endpoints": [
            "GET /api/init",
            "GET /api/<dataset>?offset=0&limit=25",
            "GET /api/<dataset>/<id>",
            "POST /api/<dataset>",
            "PUT /api/<dataset>/<id>",
            "DELETE /api/<dataset>/<id>",
        ],
    })


@bp.get("/health")
def health():
    return jsonify({"status": "ok"})
