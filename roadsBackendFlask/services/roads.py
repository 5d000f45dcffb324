"""
Google Roads API service
"""
from typing import Any, Callable, Dict, List, Sequence, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ValidationError

from .. import config
from ..errors import (ApiError, HTTPError, InvalidRequestError, MalformedResponseError,
                      RateLimitError, RequestDeniedError)
from ..models.schemas import (ErrorDetail, ErrorEnvelope, SnappedPoint, SnappedSpeedLimits,
                              SnapToRoadsResponse, SpeedLimit, SpeedLimitsResponse)
from ..utils.geo import PathInput, encode_path, place_id_params
from ..utils.http import check_response_status_code, http_get
from ..logger import get_logger

log = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

API_KEY_INVALID_MESSAGE = "The provided API key is invalid."

# error.status -> exception raised for it; anything else is a plain ApiError
ERROR_STATUS_MAP: Dict[str, Type[ApiError]] = {
    "INVALID_ARGUMENT": InvalidRequestError,
    "PERMISSION_DENIED": RequestDeniedError,
    "RESOURCE_EXHAUSTED": RateLimitError,
}

def _error_detail(body: Dict[str, Any]) -> ErrorDetail:
    try:
        return ErrorEnvelope.model_validate(body).error
    except ValidationError:
        return ErrorDetail()

def extract_roads_body(response: requests.Response) -> Dict[str, Any]:
    """
    Extracts a result from a Roads API HTTP response.

    Returns the parsed JSON object unchanged on success. Otherwise raises:
      - the transport error for the HTTP status when the body is not JSON and the status is not 200
      - MalformedResponseError when the body is not JSON but the status is 200
      - the ApiError subclass for `error.status` when the body carries an error object
      - HTTPError for any other non-200 status
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if not isinstance(body, dict):
        if response.status_code != 200:
            check_response_status_code(response)
        raise MalformedResponseError(response, "Received a malformed response.")

    if "error" in body:
        error = _error_detail(body)
        if error.status == "INVALID_ARGUMENT" and error.message == API_KEY_INVALID_MESSAGE:
            exc_cls = RequestDeniedError
        else:
            exc_cls = ERROR_STATUS_MAP.get(error.status or "", ApiError)
        raise exc_cls(response, error.message)

    if response.status_code != 200:
        raise HTTPError(response)

    return body

def _decoder(model: Type[M]) -> Callable[[requests.Response], M]:
    """Wrap extract_roads_body with validation into an endpoint response model."""
    def decode(response: requests.Response) -> M:
        body = extract_roads_body(response)
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise MalformedResponseError(response, f"Unexpected {model.__name__} shape: {e.error_count()} error(s)") from e
    return decode

def _roads_get(path: str, params: Any, model: Type[M]) -> M:
    return http_get(path, params,
                    base_url=config.ROADS_BASE_URL,
                    accepts_client_id=False,
                    response_decoder=_decoder(model))

def snap_to_roads(path: PathInput, interpolate: bool = False) -> List[SnappedPoint]:
    """
    Snaps a path to the most likely roads travelled.

    Takes up to 100 GPS points collected along a route and returns the points
    snapped to the roads the vehicle was most likely travelling along. With
    `interpolate` the result also includes points that make the path follow
    the road geometry, so it may hold more points than the input.
    """
    params = {"path": encode_path(path)}
    if interpolate:
        params["interpolate"] = "true"

    result = _roads_get("/v1/snapToRoads", params, SnapToRoadsResponse)
    if result.warning_message:
        log.warning(f"[snap_to_roads] {result.warning_message}")
    log.info(f"[snap_to_roads] snapped {len(result.snapped_points)} point(s)")
    return result.snapped_points

def speed_limits(place_ids: Union[str, Sequence[str]]) -> List[SpeedLimit]:
    """
    Returns the posted speed limit for the given road segments.

    Place IDs come from snap_to_roads; up to 100 may be passed.
    """
    params = place_id_params(place_ids)
    result = _roads_get("/v1/speedLimits", params, SpeedLimitsResponse)
    log.info(f"[speed_limits] {len(result.speed_limits)} limit(s) for {len(params)} place id(s)")
    return result.speed_limits

def snapped_speed_limits(path: PathInput) -> SnappedSpeedLimits:
    """
    Returns the posted speed limits along a path.

    The points are first snapped to the most likely roads travelled; the
    result holds both the speed limits and the snapped points.
    """
    params = {"path": encode_path(path)}
    result = _roads_get("/v1/speedLimits", params, SnappedSpeedLimits)
    log.info(f"[snapped_speed_limits] {len(result.snapped_points)} point(s), "
             f"{len(result.speed_limits)} limit(s)")
    return result
