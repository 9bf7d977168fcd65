"""
HTTP client for the remote user API.

Every method issues exactly one request and hands the raw
``requests.Response`` back to the caller, so status codes and bodies
can be asserted on by the scenarios rather than interpreted here.

Transport-level failures (DNS, refused connections, timeouts) are not
caught and nothing is retried: a ``requests.RequestException`` raised
by the underlying client reaches the caller unchanged.

Key Concepts Demonstrated:
- Thin API wrapper that keeps assertions out of the transport layer
- Explicit JSON headers for requests that carry a body
- Tolerant JSON decoding for error and empty responses
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urljoin

import requests

from reqres_suite.models import User

logger = logging.getLogger(__name__)


def safe_json(response: requests.Response) -> dict[str, Any]:
    """
    Return response JSON as dict, or an empty dict if parsing fails.

    Error responses and ``204 No Content`` carry no JSON object, so
    callers reading a single field would otherwise have to guard every
    ``response.json()`` call themselves.

    Args:
        response: A ``requests`` response object.

    Returns:
        The parsed JSON body as a dictionary, or ``{}`` if the body is
        empty, not JSON, or the top-level value is not an object.
    """
    try:
        data = response.json()
    except ValueError:
        return {}

    if isinstance(data, dict):
        return data
    return {}


def user_from_response(response: requests.Response) -> User:
    """Map a single-user response body into a ``User``."""
    return User.from_dict(safe_json(response))


def users_from_response(response: requests.Response) -> list[User]:
    """Map the ``data`` list of a paged response into ``User`` values."""
    items = safe_json(response).get("data")
    if not isinstance(items, list):
        return []
    return [User.from_dict(item) for item in items if isinstance(item, dict)]


class UsersApi:
    """
    Client for the ``/users`` resource.

    Attributes:
        base_url: Root of the API, e.g. ``https://reqres.in/api``.
        timeout: Seconds to wait for a response, or None for the
            HTTP client's default.
    """

    def __init__(self, base_url: str, timeout: float | None = None):
        self.base_url = base_url
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return urljoin(self.base_url.rstrip("/") + "/", path.lstrip("/"))

    def _send(
        self,
        method: str,
        path: str,
        *,
        user: User | None = None,
        params: dict[str, Any] | None = None,
    ) -> requests.Response:
        """
        Send one request and log its outcome.

        Args:
            method: HTTP method name.
            path: Path relative to ``base_url``.
            user: Optional payload, serialized with ``User.to_json``.
            params: Optional query-string parameters.

        Returns:
            The response exactly as received.
        """
        url = self._url(path)
        headers = {"Accept": "application/json"}
        data = None
        if user is not None:
            headers["Content-Type"] = "application/json"
            data = user.to_json()

        logger.info("Sending %s %s", method, url)
        response = requests.request(
            method=method,
            url=url,
            headers=headers,
            params=params,
            data=data,
            timeout=self.timeout,
        )
        logger.info("%s %s -> %s", method, url, response.status_code)
        return response

    def create_user(self, user: User) -> requests.Response:
        return self._send("POST", "/users", user=user)

    def update_user(self, user_id: str, user: User) -> requests.Response:
        return self._send("PUT", f"/users/{user_id}", user=user)

    def list_users(self, page: int) -> requests.Response:
        """Fetch a single page of users; no further pages are followed."""
        return self._send("GET", "/users", params={"page": page})

    def delete_user(self, user_id: str) -> requests.Response:
        return self._send("DELETE", f"/users/{user_id}")

    def get_user(self, user_id: str) -> requests.Response:
        return self._send("GET", f"/users/{user_id}")
