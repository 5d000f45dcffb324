"""
Tool registry - centralized registry of all available tools
"""
from .roads import tool_roads_snap, tool_speed_limits, tool_snapped_speed_limits

# Centralized tool registry
TOOLS = {
    "roads_snap": {
        "fn": tool_roads_snap,
        "desc": "Snap GPS points to roads (Roads API snapToRoads).",
        "schema": {"points": "[[lat,lng],...]|str", "interpolate": "bool?"},
    },
    "speed_limits": {
        "fn": tool_speed_limits,
        "desc": "Posted speed limits for place ids (Roads API speedLimits).",
        "schema": {"place_ids": "str|[str,...]"},
    },
    "snapped_speed_limits": {
        "fn": tool_snapped_speed_limits,
        "desc": "Snap GPS points, then speed limits along them (Roads API speedLimits).",
        "schema": {"points": "[[lat,lng],...]|str"},
    },
}

def run_tool(name: str, args: dict) -> dict:
    """Look up a tool by name and call it with keyword args"""
    spec = TOOLS.get(name)
    if not spec:
        return {"error": "unknown_tool", "tool": name}
    try:
        return spec["fn"](**(args or {}))
    except TypeError as e:
        return {"error": "bad_arguments", "tool": name, "message": str(e)}
