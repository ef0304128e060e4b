from flask import Blueprint, jsonify

from app.grimoire.constants import reference_payload

bp = Blueprint("routes", __name__)


@bp.get("/")
def index():
    return {"name": "The Paradox Wheel", "api": "/api"}


@bp.get("/health")
def health():
    """Health check endpoint. Returns JSON."""
    return {"ok": True}


@bp.get("/healthz")
def healthz():
    """
    Fast liveness check. No DB access.
    """
    return "ok", 200


@bp.get("/api/reference")
def reference():
    """Static game data: factions, spheres, aliases, tradition groups."""
    return jsonify(reference_payload())
