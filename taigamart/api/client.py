"""
Marketplace API Client

Shared HTTP client for the Taiga storefront and POS JSON APIs.
Handles authentication headers, 401 expiry, retryable status codes and
error translation.
"""

import logging
import math
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import urljoin

import requests

from .auth import AuthContext
from .errors import APIError, AuthenticationExpired, TransportError

logger = logging.getLogger(__name__)


class MarketplaceAPIClient:
    """
    Shared client for the marketplace REST API.

    Handles:
    - Bearer authentication from an explicit AuthContext (per client or per call)
    - Token expiry: a 401 clears the context and raises AuthenticationExpired
    - Retry-After handling for 429/502/503/504 when max_retries > 1
    - Translation of transport and HTTP failures into APIError subclasses

    Usage:
        client = MarketplaceAPIClient("http://localhost:8000", auth=AuthContext(token="abc"))

        body = client.get("/api/v1/products", params={"page": 2})
        body = client.post("/api/v1/contact", {"name": "A", ...})
    """

    RETRYABLE_STATUS_CODES = {429, 502, 503, 504}
    SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")

    def __init__(
        self,
        base_url: str,
        auth: Optional[AuthContext] = None,
        timeout: int = 30,
        max_retries: int = 1,
    ):
        """
        Initialize the API client.

        Args:
            base_url: API root (e.g. http://localhost:8000)
            auth: Default auth context for requests that do not pass their own
            timeout: Request timeout in seconds
            max_retries: Attempts per request for retryable status codes (1 = no retry)
        """
        self.base_url = base_url.rstrip("/")
        self.auth = auth or AuthContext()
        self.timeout = timeout
        self.max_retries = max(1, max_retries)

        self.session = requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

        self.requests_made = 0

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def _url(self, endpoint: str) -> str:
        return urljoin(self.base_url + "/", endpoint.lstrip("/"))

    @staticmethod
    def _error_message(response: requests.Response) -> tuple:
        """Message and decoded body of an error response."""
        try:
            data = response.json()
        except ValueError:
            data = None

        message = None
        if isinstance(data, dict):
            message = data.get("message") or data.get("error")
        if not message:
            message = response.reason or response.text[:200] or "An unexpected error occurred"
        return str(message), data

    @staticmethod
    def _retry_after(response: requests.Response, attempt: int) -> int:
        """
        Seconds to wait before the next attempt.

        Uses a delta-seconds Retry-After header; the HTTP-date form and
        unparseable values fall back to exponential backoff.
        """
        backoff = 2 ** attempt
        value = response.headers.get("Retry-After")
        if value is None:
            return backoff
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            logger.debug("Unusable Retry-After header %r, backing off %ds", value, backoff)
            return backoff
        if not math.isfinite(seconds) or seconds < 0:
            return backoff
        return math.ceil(seconds)

    def _send(self, method: str, url: str, headers: Dict[str, str], **kwargs) -> requests.Response:
        if method == "GET":
            return self.session.get(url, headers=headers, timeout=self.timeout, **kwargs)
        elif method == "POST":
            return self.session.post(url, headers=headers, timeout=self.timeout, **kwargs)
        elif method == "PUT":
            return self.session.put(url, headers=headers, timeout=self.timeout, **kwargs)
        elif method == "PATCH":
            return self.session.patch(url, headers=headers, timeout=self.timeout, **kwargs)
        elif method == "DELETE":
            return self.session.delete(url, headers=headers, timeout=self.timeout, **kwargs)
        raise ValueError(f"Unsupported method: {method}")

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Any] = None,
        auth: Optional[AuthContext] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make a REST request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            endpoint: Path relative to the base URL (e.g. "/api/v1/products")
            params: Query parameters
            data: JSON body for POST/PUT/PATCH
            auth: Auth context for this call (defaults to the client's)
            files: Multipart files (replaces the JSON body)

        Returns:
            Decoded JSON body (None for an empty 204 response)

        Raises:
            AuthenticationExpired: On HTTP 401 (token already cleared)
            TransportError: On timeout or connection failure
            APIError: On any other HTTP error or undecodable body
        """
        method = method.upper()
        if method not in self.SUPPORTED_METHODS:
            raise ValueError(f"Unsupported method: {method}")

        context = auth or self.auth
        url = self._url(endpoint)
        headers = context.headers()

        kwargs: Dict[str, Any] = {}
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}
        if files:
            kwargs["files"] = files
            # Let requests set the multipart boundary
            headers = {**headers, "Content-Type": None}
        elif data is not None:
            kwargs["json"] = data

        for attempt in range(self.max_retries):
            self.requests_made += 1

            try:
                response = self._send(method, url, headers, **kwargs)
            except requests.exceptions.Timeout:
                logger.error("Request timeout: %s %s", method, endpoint)
                raise TransportError(f"Request timed out: {endpoint}")
            except requests.exceptions.RequestException as e:
                logger.error("Request failed: %s", e)
                raise TransportError(f"Request failed: {e}")

            if response.status_code == 401:
                logger.warning("HTTP 401 on %s, clearing stored token", endpoint)
                context.expire()
                message, body = self._error_message(response)
                raise AuthenticationExpired(context.login_route, message=message, data=body)

            # Retry on rate limiting or server errors while attempts remain
            if response.status_code in self.RETRYABLE_STATUS_CODES and attempt + 1 < self.max_retries:
                retry_after = self._retry_after(response, attempt)
                logger.warning("HTTP %d on %s, retry %d/%d in %ds...",
                               response.status_code, endpoint, attempt + 1,
                               self.max_retries, retry_after)
                time.sleep(retry_after)
                continue

            if response.status_code >= 400:
                message, body = self._error_message(response)
                logger.error("API Error %d: %s", response.status_code, message)
                raise APIError(message, status=response.status_code, data=body)

            if response.status_code == 204 or not response.content:
                return None

            try:
                return response.json()
            except ValueError:
                logger.error("Invalid JSON from %s", endpoint)
                raise APIError(f"Invalid JSON response from {endpoint}", status=response.status_code)

        # Unreachable: the final attempt either returns or raises
        raise APIError(f"Max retries ({self.max_retries}) exceeded for {method} {endpoint}")

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None,
            auth: Optional[AuthContext] = None) -> Any:
        return self.request("GET", endpoint, params=params, auth=auth)

    def post(self, endpoint: str, data: Optional[Any] = None,
             auth: Optional[AuthContext] = None) -> Any:
        return self.request("POST", endpoint, data=data, auth=auth)

    def put(self, endpoint: str, data: Optional[Any] = None,
            auth: Optional[AuthContext] = None) -> Any:
        return self.request("PUT", endpoint, data=data, auth=auth)

    def patch(self, endpoint: str, data: Optional[Any] = None,
              auth: Optional[AuthContext] = None) -> Any:
        return self.request("PATCH", endpoint, data=data, auth=auth)

    def delete(self, endpoint: str, auth: Optional[AuthContext] = None) -> Any:
        return self.request("DELETE", endpoint, auth=auth)

    def upload(self, endpoint: str, file_path: Union[str, Path],
               auth: Optional[AuthContext] = None) -> Any:
        """Upload a file as multipart form field "file"."""
        path = Path(file_path)
        with open(path, "rb") as f:
            return self.request("POST", endpoint, files={"file": (path.name, f)}, auth=auth)

    def test_connection(self) -> bool:
        """
        Check the API answers by fetching the category list.

        Returns:
            True if the API responded
        """
        try:
            self.get("/api/v1/categories")
        except APIError as e:
            logger.error("Connection test failed: %s", e.message)
            return False
        logger.info("Connected to: %s", self.base_url)
        return True
