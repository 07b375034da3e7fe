# factory_admin/api.py
"""
REST backend client with singleton pattern

Every backend response follows the errFlag convention:
    {"errFlag": 0, "data": [...], "message": "..."}   -> success
    {"errFlag": 1, "message": "..."}                   -> failure
Some list endpoints skip the envelope and return a bare JSON array.

Version: 1.0.0
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import httpx

from .config import API_CONFIG

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."

# Singleton client instance
_client = None
_client_lock = threading.Lock()


# ==================== Exceptions ====================

class ApiError(Exception):
    """Base error for backend calls"""

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class ApiConnectionError(ApiError):
    """Network failure, timeout, HTTP error status or unreadable body"""


class ApiResponseError(ApiError):
    """Backend answered with errFlag != 0"""

    def __init__(self, message: str, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message or GENERIC_ERROR_MESSAGE)
        self.payload = payload or {}


# ==================== Payload Helpers ====================

def ensure_ok(payload: Any) -> Any:
    """
    Raise ApiResponseError when payload carries a non-zero errFlag

    Bare arrays and dicts without errFlag pass through unchanged.
    """
    if isinstance(payload, dict) and "errFlag" in payload:
        try:
            err_flag = int(payload.get("errFlag") or 0)
        except (TypeError, ValueError):
            err_flag = 1
        if err_flag != 0:
            message = payload.get("message") or GENERIC_ERROR_MESSAGE
            raise ApiResponseError(message, payload)
    return payload


def extract_list(payload: Any, key: str = "data") -> List[Dict[str, Any]]:
    """
    Pull the record list out of a list response

    Accepts a bare array or an {errFlag, <key>: [...]} envelope.

    Raises:
        ApiResponseError: errFlag is non-zero
        ApiConnectionError: payload has an unexpected shape
    """
    if isinstance(payload, list):
        return payload

    if isinstance(payload, dict):
        ensure_ok(payload)
        rows = payload.get(key)
        if rows is None:
            return []
        if isinstance(rows, list):
            return rows
        if isinstance(rows, dict):
            return [rows]

    raise ApiConnectionError(f"Unexpected response format from server ({type(payload).__name__})")


# ==================== Client ====================

class ApiClient:
    """Thin wrapper over httpx.Client for the admin backend"""

    def __init__(self, base_url: str, token: str = "", timeout: float = 30,
                 transport: Optional[httpx.BaseTransport] = None):
        self.base_url = (base_url or "").rstrip("/")
        self.token = token or ""
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self):
        self._http.close()

    def build_path(self, template: str, **params: Any) -> str:
        """
        Fill an endpoint template such as 'clients/change-status/{id}/{status}/{token}'

        {token} defaults to the client's token. Values are URL-quoted.
        """
        values = {"token": self.token}
        values.update(params)
        quoted = {k: quote(str(v), safe="") for k, v in values.items()}
        return template.format(**quoted)

    def _send(self, method: str, path: str, **kwargs) -> Any:
        url = "/" + path.lstrip("/")
        try:
            response = self._http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"❌ {method} {path} -> HTTP {e.response.status_code}")
            raise ApiConnectionError(f"Server error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"❌ {method} {path} failed: {e}")
            raise ApiConnectionError("Cannot reach the server. Please check your connection.") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"❌ {method} {path} returned a non-JSON body")
            raise ApiConnectionError("Invalid response from server") from e

    def get_json(self, path: str) -> Any:
        """GET a path and return decoded JSON"""
        return self._send("GET", path)

    def post_form(self, path: str, fields: Dict[str, Any]) -> Any:
        """
        POST a multipart form and return decoded JSON

        Every field is sent as a plain form part. The session token is
        appended when the caller did not set one.
        """
        form = dict(fields)
        form.setdefault("token", self.token)
        parts = [
            (name, (None, b"" if value is None else str(value).encode("utf-8")))
            for name, value in form.items()
        ]
        return self._send("POST", path, files=parts)


def get_api_client() -> ApiClient:
    """
    Create and return the shared ApiClient (singleton pattern)

    Reuses one httpx connection pool across Streamlit reruns.
    """
    global _client

    # Double-checked locking pattern for thread safety
    if _client is None:
        with _client_lock:
            if _client is None:
                base_url = API_CONFIG["base_url"]
                logger.info(f"🔌 Creating API client for {base_url or '<unset>'}")
                _client = ApiClient(
                    base_url=base_url,
                    token=API_CONFIG["token"],
                    timeout=API_CONFIG["timeout"],
                )

    return _client


def reset_api_client():
    """Drop the shared client; the next call builds a fresh one"""
    global _client

    with _client_lock:
        if _client is not None:
            try:
                _client.close()
            except Exception as e:
                logger.error(f"Error closing API client: {e}")
            _client = None

    logger.info("🔄 API client reset")


def check_connection(client: Optional[ApiClient] = None) -> Tuple[bool, Optional[str]]:
    """
    Check that the backend answers

    Returns:
        Tuple of (is_connected, error_message)
    """
    client = client or get_api_client()
    if not client.base_url:
        return False, "API base URL is not configured"

    try:
        client.get_json(client.build_path("masters/get-table-counts/{token}"))
        return True, None
    except ApiConnectionError as e:
        return False, e.message
    except ApiResponseError:
        # Reachable; the endpoint itself refused
        return True, None
