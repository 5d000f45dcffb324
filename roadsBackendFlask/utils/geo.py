"""
Geospatial parameter encoding for Roads API requests
"""
from numbers import Real
from typing import Any, List, Sequence, Tuple, Union

from ..errors import InvalidArgument

LatLng = Tuple[float, float]
PathInput = Union[str, LatLng, Sequence[Union[str, LatLng]]]

def _is_number(v: Any) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool)

def is_latlng(any_val: Any) -> bool:
    """True for a two-number (lat, lng) list/tuple."""
    return (isinstance(any_val, (list, tuple)) and len(any_val) == 2
            and _is_number(any_val[0]) and _is_number(any_val[1]))

def latlng(any_val: Any) -> str:
    """Render a (lat, lng) pair as "lat,lng"."""
    if not is_latlng(any_val):
        raise InvalidArgument(f"Expected a (lat, lng) pair, got {any_val!r}")
    return f"{float(any_val[0])},{float(any_val[1])}"

def as_list(any_val: Any) -> List[Any]:
    """
    Wrap a scalar into a one-element list.
    A bare coordinate pair counts as a scalar; strings are never iterated.
    """
    if isinstance(any_val, str) or is_latlng(any_val):
        return [any_val]
    if isinstance(any_val, (list, tuple)):
        return list(any_val)
    return [any_val]

def join_list(sep: str, items: Sequence[str]) -> str:
    return sep.join(items)

def normalize_path(path: PathInput) -> List[Union[str, LatLng]]:
    """
    Accepts a single [lat, lng], a list of [lat, lng] pairs, a list of place-id
    strings or an already encoded string; returns the list of path elements.
    """
    if path is None:
        raise InvalidArgument("path is required")
    items = as_list(path)
    if not items:
        raise InvalidArgument("path must contain at least one point")
    for item in items:
        if isinstance(item, str):
            if not item.strip():
                raise InvalidArgument("path elements must not be blank")
            continue
        if not is_latlng(item):
            raise InvalidArgument(f"path element must be a (lat, lng) pair or a string, got {item!r}")
    return items

def encode_path(path: PathInput) -> str:
    """Encode a path as "lat,lng|lat,lng"; string elements pass through unchanged."""
    items = normalize_path(path)
    return join_list("|", [i if isinstance(i, str) else latlng(i) for i in items])

def place_id_params(place_ids: Union[str, Sequence[str]]) -> List[Tuple[str, str]]:
    """One ("placeId", id) query pair per id, in input order."""
    if place_ids is None:
        raise InvalidArgument("place_ids is required")
    ids = as_list(place_ids)
    if not ids:
        raise InvalidArgument("at least one place id is required")
    for pid in ids:
        if not isinstance(pid, str) or not pid.strip():
            raise InvalidArgument(f"place id must be a non-empty string, got {pid!r}")
    return [("placeId", pid) for pid in ids]
