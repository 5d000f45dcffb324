"""
HTTP API routes for the Roads backend
"""
import requests
from flask import Flask, request, jsonify

from ..auth.firebase import ADMIN_READY, require_auth
from ..config import GOOGLE_MAPS_API_KEY, REQUIRE_AUTH, ROADS_BASE_URL
from ..errors import InvalidArgument, RoadsError
from ..services.roads import snap_to_roads, speed_limits, snapped_speed_limits
from .middleware import (error_response_body, parse_interpolate, parse_path, parse_place_ids,
                         request_data)
from ..logger import get_logger

log = get_logger(__name__)

def create_api_routes(app: Flask):
    """Create all API routes for the Flask app"""

    @app.errorhandler(InvalidArgument)
    @app.errorhandler(RoadsError)
    @app.errorhandler(requests.RequestException)
    def roads_error(e):
        body, code = error_response_body(e)
        log.warning(f"[api] {request.method} {request.path} -> {code} {body['error']}: {body['message']}")
        return jsonify(body), code

    @app.route("/api/health")
    def health():
        return jsonify({
            "ok": True,
            "roadsBaseUrl": ROADS_BASE_URL,
            "googleKeySet": bool(GOOGLE_MAPS_API_KEY),
            "requireAuth": REQUIRE_AUTH,
            "authReady": ADMIN_READY,
        })

    @app.route("/api/tools")
    def tools():
        from ..tools.registry import TOOLS
        return jsonify({
            "tools": [
                {"name": k, "desc": v.get("desc"), "schema": v.get("schema")}
                for k, v in TOOLS.items()
            ]
        })

    @app.route("/api/tools/<name>", methods=["POST"])
    @require_auth
    def run_tool_route(name):
        from ..tools.registry import TOOLS, run_tool
        if name not in TOOLS:
            return jsonify({"error": "unknown_tool", "tool": name}), 404
        result = run_tool(name, request_data())
        code = 400 if result.get("error") == "bad_arguments" else 200
        return jsonify(result), code

    @app.route("/api/roads/snap", methods=["GET", "POST"])
    @require_auth
    def roads_snap():
        data = request_data()
        points = snap_to_roads(parse_path(data), interpolate=parse_interpolate(data))
        return jsonify({
            "snappedPoints": [p.model_dump(by_alias=True, exclude_none=True) for p in points],
        })

    @app.route("/api/roads/speed-limits", methods=["GET", "POST"])
    @require_auth
    def roads_speed_limits():
        data = request_data()
        limits = speed_limits(parse_place_ids(data))
        return jsonify({
            "speedLimits": [s.model_dump(by_alias=True, mode="json") for s in limits],
        })

    @app.route("/api/roads/snapped-speed-limits", methods=["GET", "POST"])
    @require_auth
    def roads_snapped_speed_limits():
        data = request_data()
        result = snapped_speed_limits(parse_path(data))
        return jsonify(result.model_dump(by_alias=True, mode="json", exclude_none=True))
