# remserver/extensions.py
from uuid import uuid4

from flask import current_app, g, session
from flask_cors import CORS

from .services.remserver import RemServer
from .storage.json_store import JsonSessionStore
from .storage.session_store import FlaskSessionStore

# CORS is a real Flask extension (keeps init_app)
cors = CORS()

SESSION_ID_KEY = "remserver_sid"


def session_store():
    """Session store for the current request, chosen by REMSERVER_SESSION_BACKEND."""
    backend = current_app.config.get("REMSERVER_SESSION_BACKEND", "cookie")
    if backend == "file":
        if SESSION_ID_KEY not in session:
            session[SESSION_ID_KEY] = uuid4().hex
        return JsonSessionStore(current_app.config["SESSION_DIR"], session[SESSION_ID_KEY])
    if backend != "cookie":
        raise ValueError(f"Unknown session backend: {backend}")
    return FlaskSessionStore(session)


def get_remserver() -> RemServer:
    """Engine bound to the current request's session, created once per request."""
    if "remserver" not in g:
        g.remserver = RemServer(session_store()).configure(
            current_app.config.get("REMSERVER_DATASETS", [])
        )
    return g.remserver
