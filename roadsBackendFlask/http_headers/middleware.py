"""
HTTP middleware and utilities
"""
from typing import Any, Dict, List, Tuple

import requests
from flask import request

from ..errors import (InvalidArgument, InvalidRequestError, RateLimitError, RequestDeniedError,
                      RoadsError)
from ..utils.jsonx import truthy_str

# Most specific class first
ERROR_HTTP_STATUS: List[Tuple[type, int]] = [
    (InvalidArgument, 400),
    (InvalidRequestError, 400),
    (RequestDeniedError, 403),
    (RateLimitError, 429),
    (RoadsError, 502),
    (requests.RequestException, 502),
]

def request_data() -> Dict[str, Any]:
    """JSON body for POST, query args for GET"""
    if request.method == "POST":
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise InvalidArgument("expected a JSON object body")
        return body
    return request.args.to_dict(flat=True)

def parse_path(data: Dict[str, Any]) -> Any:
    """`path` as an encoded string or a list of [lat, lng] pairs"""
    path = data.get("path")
    if path is None or path == "" or path == []:
        raise InvalidArgument("missing path")
    return path

def parse_interpolate(data: Dict[str, Any]) -> bool:
    val = truthy_str(data.get("interpolate"))
    return bool(val)

def parse_place_ids(data: Dict[str, Any]) -> List[str]:
    """Repeated ?placeId=... on GET; `place_ids` / `placeIds` list on POST"""
    if request.method == "GET":
        ids = request.args.getlist("placeId")
    else:
        ids = data.get("place_ids") or data.get("placeIds") or []
        if isinstance(ids, str):
            ids = [ids]
    if not ids:
        raise InvalidArgument("missing placeId")
    return ids

def error_response_body(exc: Exception) -> Tuple[Dict[str, Any], int]:
    """JSON body and HTTP status for a failed roads call"""
    for cls, code in ERROR_HTTP_STATUS:
        if isinstance(exc, cls):
            body: Dict[str, Any] = {"error": exc.__class__.__name__, "message": str(exc)}
            if isinstance(exc, RoadsError) and exc.status_code is not None:
                body["upstreamStatus"] = exc.status_code
            return body, code
    return {"error": "internal_error", "message": str(exc)}, 500
