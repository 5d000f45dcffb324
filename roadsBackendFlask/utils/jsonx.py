"""
JSON and query-string value helpers
"""
from typing import Any, Optional

def truthy_str(v: Any) -> Optional[bool]:
    """Convert various values to boolean"""
    if isinstance(v, bool):
        return v
    if v is None:
        return None
    s = str(v).strip().lower()
    if s in {"y", "yes", "true", "1"}:
        return True
    if s in {"n", "no", "false", "0", ""}:
        return False
    return None
