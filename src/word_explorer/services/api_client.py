"""API Client - JSON over HTTP against the dictionary REST API."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred while communicating with the API."
UNAUTHORIZED_MESSAGE = "Unauthorized."


class ApiError(Exception):
    """Non-2xx response, unparsable body or transport failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UnauthorizedError(ApiError):
    """HTTP 401 from the API."""


class EmptyResultFallbackError(ApiError):
    """Exact-term lookup failed after a search returned no results."""


def build_query_params(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """Flatten filter params, skipping None/empty values and repeating list values."""
    query: List[Tuple[str, str]] = []
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, (list, tuple)):
            query.extend((key, str(item)) for item in value)
        elif isinstance(value, bool):
            query.append((key, "true" if value else "false"))
        else:
            query.append((key, str(value)))
    return query


class ApiClient:
    """
    Thin wrapper over a requests.Session.

    Every call returns decoded JSON or raises ApiError / UnauthorizedError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    def fetch_with_filter(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """GET `endpoint` with query-string filters."""
        response = self._request("GET", endpoint, params=build_query_params(params or {}))
        return self._decode(response)

    def fetch(self, endpoint: str) -> Any:
        response = self._request("GET", endpoint)
        return self._decode(response)

    def send(self, endpoint: str, method: str, body: Dict[str, Any]) -> Any:
        """POST/PUT/PATCH a JSON body."""
        if method not in ("POST", "PUT", "PATCH"):
            raise ValueError(f"Unsupported method for send: {method}")
        response = self._request(method, endpoint, json=body)
        return self._decode(response)

    def delete(self, endpoint: str) -> Any:
        """DELETE; returns the JSON body when there is one, else {}."""
        response = self._request("DELETE", endpoint)
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return self._decode(response)
        return {}

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s %s", method, url, kwargs.get("params") or "")
        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("Request %s %s failed: %s", method, url, exc)
            raise ApiError(DEFAULT_ERROR_MESSAGE) from exc

        if not response.ok:
            self._raise_for_status(response)
        return response

    def _raise_for_status(self, response: requests.Response) -> None:
        message = self._error_message(response)
        logger.warning("API responded %s: %s", response.status_code, message)
        if response.status_code == 401:
            raise UnauthorizedError(message or UNAUTHORIZED_MESSAGE, status_code=401)
        raise ApiError(message or DEFAULT_ERROR_MESSAGE, status_code=response.status_code)

    @staticmethod
    def _error_message(response: requests.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get("message"):
            message = body["message"]
            # Validation errors may come back as a list of messages
            if isinstance(message, list):
                return "; ".join(str(item) for item in message)
            return str(message)
        return None

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(DEFAULT_ERROR_MESSAGE, status_code=response.status_code) from exc
