"""
Roads tools: service calls turned into JSON-safe observations
"""
from typing import Any, Dict, List, Union

import requests

from ..errors import InvalidArgument, RoadsError
from ..services.roads import snap_to_roads, speed_limits, snapped_speed_limits
from ..logger import get_logger

log = get_logger(__name__)

def error_observation(e: Exception) -> Dict[str, Any]:
    """Describe a failure the way tool observations report them."""
    if isinstance(e, InvalidArgument):
        return {"error": "invalid_argument", "message": str(e)}
    if isinstance(e, RoadsError):
        return {"error": e.__class__.__name__, "message": e.message, "status": e.status_code}
    return {"error": f"roads_failure:{str(e)}"}

def tool_roads_snap(points: Any, interpolate: bool = False) -> Dict[str, Any]:
    """Snap GPS points to roads using Roads API"""
    try:
        snapped = snap_to_roads(points, interpolate=interpolate)
    except (InvalidArgument, RoadsError, requests.RequestException) as e:
        log.warning(f"[tool_roads_snap] {e.__class__.__name__}: {e}")
        return error_observation(e)
    sp = [p.model_dump(by_alias=True, exclude_none=True) for p in snapped]
    return {"snappedPoints": sp, "count": len(sp)}

def tool_speed_limits(place_ids: Union[str, List[str]]) -> Dict[str, Any]:
    """Posted speed limits for road segments by place id"""
    try:
        limits = speed_limits(place_ids)
    except (InvalidArgument, RoadsError, requests.RequestException) as e:
        log.warning(f"[tool_speed_limits] {e.__class__.__name__}: {e}")
        return error_observation(e)
    sl = [s.model_dump(by_alias=True, mode="json") for s in limits]
    return {"speedLimits": sl, "count": len(sl)}

def tool_snapped_speed_limits(points: Any) -> Dict[str, Any]:
    """Snap GPS points and return posted speed limits along them"""
    try:
        result = snapped_speed_limits(points)
    except (InvalidArgument, RoadsError, requests.RequestException) as e:
        log.warning(f"[tool_snapped_speed_limits] {e.__class__.__name__}: {e}")
        return error_observation(e)
    out = result.model_dump(by_alias=True, mode="json", exclude_none=True)
    out["count"] = len(result.speed_limits)
    return out
