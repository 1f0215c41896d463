from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from figma_converter.errors import ConverterError, ErrorCategory, ValidationError

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

_STATUS_BY_CATEGORY = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.AUTHENTICATION: 401,
    ErrorCategory.FIGMA_API: 502,
    ErrorCategory.NETWORK: 502,
}


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.errorhandler(ConverterError)
def handle_converter_error(exc: ConverterError):
    status = _STATUS_BY_CATEGORY.get(exc.category, 500)
    if status >= 500:
        logger.warning("Request failed: %s (%s)", exc, exc.code)
    return jsonify(exc.to_dict()), status


@api_bp.route("/css/process", methods=["OPTIONS"])
@api_bp.route("/css/preview", methods=["OPTIONS"])
def css_preflight():
    """Handle CORS preflight for CSS submission."""
    return "", 204


def _json_body() -> dict:
    """The request JSON object, or {} when the body is missing or not JSON."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object", code="VALIDATION_BAD_BODY")
    return data


def _user_id(data: dict) -> int:
    raw = data.get("userId")
    if raw is None or raw == "":
        return current_app.config["CONVERTER"].default_user_id
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(
            f"userId must be an integer, got {raw!r}", code="VALIDATION_BAD_USER_ID"
        ) from None


@api_bp.route("/css/process", methods=["POST"])
def process_css():
    """Convert submitted CSS and record the result as a job."""
    data = _json_body()
    service = current_app.extensions["css_service"]
    job = service.submit(data.get("cssCode"), options=data.get("options"), user_id=_user_id(data))
    return jsonify({"jobId": job.id, "status": job.status.value}), 202


@api_bp.route("/css/preview", methods=["POST"])
def preview_css():
    """Convert submitted CSS and return the generated code directly."""
    data = _json_body()
    conversion = current_app.extensions["css_service"].convert(data.get("cssCode"))
    return jsonify(conversion.to_dict())


@api_bp.route("/jobs/<job_id>")
def get_job(job_id: str):
    job = current_app.extensions["job_repo"].get(job_id)
    if job is None:
        return jsonify({"error": "Job not found"}), 404
    return jsonify(job.to_dict())


@api_bp.route("/jobs")
def list_jobs():
    """The ten most recent jobs for a user, newest first."""
    default_user = current_app.config["CONVERTER"].default_user_id
    user_id = request.args.get("userId", default=default_user, type=int)
    jobs = current_app.extensions["job_repo"].list_by_user(user_id, limit=10)
    return jsonify([job.to_dict() for job in jobs])


@api_bp.route("/components/<component_id>")
def get_component(component_id: str):
    component = current_app.extensions["component_repo"].get(component_id)
    if component is None:
        return jsonify({"error": "Component not found"}), 404
    return jsonify(component.to_dict())


@api_bp.route("/stats")
def stats():
    """Job counts grouped by status."""
    return jsonify({"jobs": current_app.extensions["job_repo"].count_by_status()})
