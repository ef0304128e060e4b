from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from app.grimoire.db import db_session
from app.grimoire.errors import ValidationError, api_errors
from app.grimoire.modules.resources.models import Resource
from app.grimoire.modules.resources.service import (
    create_resource,
    list_resources,
    update_resource,
    validate_resource_payload,
)
from app.grimoire.utils import get_or_404, json_body

bp = Blueprint("resources", __name__)


@bp.get("/resources")
@api_errors("Failed to fetch resources")
def resources_list():
    return jsonify([r.to_dict() for r in list_resources(db_session())])


@bp.post("/resources")
@api_errors("Failed to create resource")
def resources_create():
    s = db_session()
    payload = json_body()

    errors = validate_resource_payload(payload)
    if errors:
        raise ValidationError(errors[0])

    resource = create_resource(s, payload)
    s.commit()
    return jsonify(resource.to_dict()), 201


@bp.get("/resources/<int:resource_id>")
@api_errors("Failed to fetch resource")
def resource_detail(resource_id: int):
    resource = get_or_404(db_session(), Resource, resource_id, "Resource not found")
    return jsonify(resource.to_dict())


@bp.put("/resources/<int:resource_id>")
@api_errors("Failed to update resource")
def resource_update(resource_id: int):
    s = db_session()
    resource = get_or_404(s, Resource, resource_id, "Resource not found")
    payload = json_body()

    errors = validate_resource_payload(payload)
    if errors:
        raise ValidationError(errors[0])

    update_resource(s, resource, payload)
    s.commit()
    return jsonify(resource.to_dict())


@bp.delete("/resources/<int:resource_id>")
@api_errors("Failed to delete resource")
def resource_delete(resource_id: int):
    s = db_session()
    resource = get_or_404(s, Resource, resource_id, "Resource not found")
    s.delete(resource)
    s.commit()
    current_app.logger.info("Resource deleted id=%s", resource_id)
    return jsonify({"message": "Resource deleted successfully"})
