"""
HTTP utilities for API calls
"""
import random
import time
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

import requests

from .. import config
from ..errors import ClientError, RateLimitError, RedirectError, ServerError
from ..logger import get_logger

log = get_logger(__name__)

Params = Union[Dict[str, Any], Sequence[Tuple[str, Any]]]

def check_response_status_code(response: requests.Response) -> None:
    """Raise the transport-level error matching a raw HTTP status."""
    code = response.status_code
    if 200 <= code < 300:
        return
    if code in (301, 302, 303, 307):
        raise RedirectError(response, f"Redirect to {response.headers.get('Location')}")
    if code == 401:
        raise ClientError(response, "Unauthorized")
    if code == 304 or 400 <= code < 500:
        raise ClientError(response, "Invalid request")
    if 500 <= code < 600:
        raise ServerError(response, "Server error")

def _query(params: Optional[Params], key: str) -> List[Tuple[str, Any]]:
    items = list(params.items()) if isinstance(params, dict) else list(params or [])
    if key:
        items.append(("key", key))
    return items

def _is_retriable(exc: Exception) -> bool:
    if isinstance(exc, ServerError):
        return True
    return isinstance(exc, RateLimitError) and config.RETRY_OVER_QUERY_LIMIT

def http_get(url: str, params: Optional[Params] = None, *,
             response_decoder: Callable[[requests.Response], Any],
             headers: Optional[Dict[str, str]] = None,
             timeout: Optional[float] = None, base_url: Optional[str] = None,
             accepts_client_id: bool = True,
             max_retries: Optional[int] = None):
    """
    Make HTTP GET request.

    `url` is joined onto `base_url` when one is given. The configured API key
    is sent as the `key` query parameter. Endpoints with accepts_client_id=False
    never receive client/signature parameters. Returns
    `response_decoder(response)`; ServerError (plus RateLimitError when
    RETRY_OVER_QUERY_LIMIT is on) is retried with exponential backoff.
    """
    full_url = f"{base_url.rstrip('/')}{url}" if base_url else url
    query = _query(params, config.GOOGLE_MAPS_API_KEY)
    if not accepts_client_id:
        query = [(k, v) for k, v in query if k not in ("client", "signature")]
    timeout = timeout if timeout is not None else config.HTTP_TIMEOUT
    retries = config.HTTP_MAX_RETRIES if max_retries is None else max_retries

    attempt = 0
    while True:
        r = requests.get(full_url, params=query, headers=headers or {}, timeout=timeout)
        try:
            return response_decoder(r)
        except (ServerError, RateLimitError) as e:
            if attempt >= retries or not _is_retriable(e):
                raise
            delay = config.RETRY_BASE_DELAY * (2 ** attempt) * (0.5 + random.random())
            log.warning(f"[http_get] {full_url} failed with {e.__class__.__name__}: {e}; "
                        f"retry {attempt + 1}/{retries} in {delay:.2f}s")
            time.sleep(delay)
            attempt += 1
