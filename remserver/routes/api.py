from flask import Blueprint, current_app, jsonify, request

from ..exceptions import ConfigurationError, MalformedInput
from ..extensions import get_remserver
from ..utils.pagination import page_args, paginate

bp = Blueprint("api", __name__)

MALFORMED_BODY = "500. HTTP request body is not an object/array or valid JSON."
NOT_SUPPORTED = "404. The api does not support that."
NOT_FOUND = "The item is not found."

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def _body_entry() -> dict:
    entry = request.get_json(force=True, silent=True)
    if not isinstance(entry, dict):
        raise MalformedInput(MALFORMED_BODY)
    return entry


@bp.before_request
def ensure_dataset():
    rem = get_remserver()
    if not rem.has_dataset():
        rem.init()


@bp.errorhandler(ConfigurationError)
def configuration_error(e):
    current_app.logger.exception("Failed to load default datasets")
    return jsonify({"message": f"500. {e}"}), 500


@bp.errorhandler(MalformedInput)
def malformed_input(e):
    current_app.logger.warning("Rejected request body on %s %s: %s", request.method, request.path, e)
    return jsonify({"message": MALFORMED_BODY}), 500


@bp.get("/init")
def init_session():
    rem = get_remserver()
    rem.init()
    current_app.logger.info("Session re-initiated with %d dataset(s)", len(rem.default_datasets))
    return jsonify({
        "message": "The session is initiated with the default dataset(s).",
        "dataset": rem.default_datasets,
    })


@bp.get("/<dataset>")
def get_dataset(dataset: str):
    offset, limit = page_args(request.args, current_app.config.get("REMSERVER_PAGE_LIMIT", 25))
    return jsonify(paginate(get_remserver().get_dataset(dataset), offset, limit))


@bp.get("/<dataset>/<int:item_id>")
def get_item(dataset: str, item_id: int):
    item = get_remserver().get_item(dataset, item_id)
    if item is None:
        return jsonify({"message": NOT_FOUND})
    return jsonify(item.to_json())


@bp.post("/<dataset>")
def post_item(dataset: str):
    item = get_remserver().add_item(dataset, _body_entry())
    return jsonify(item.to_json())


@bp.put("/<dataset>/<int:item_id>")
def put_item(dataset: str, item_id: int):
    item = get_remserver().upsert_item(dataset, item_id, _body_entry())
    return jsonify(item.to_json())


@bp.delete("/<dataset>/<int:item_id>")
def delete_item(dataset: str, item_id: int):
    get_remserver().delete_item(dataset, item_id)
    return jsonify({"message": f"Item id '{item_id}' was deleted from dataset '{dataset}'."})


@bp.route("/", defaults={"path": ""}, methods=ALL_METHODS)
@bp.route("/<path:path>", methods=ALL_METHODS)
def catch_all(path: str):
    return jsonify({"message": NOT_SUPPORTED}), 404
