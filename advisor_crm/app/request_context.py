"""Caller-owned request context for outgoing API calls."""

from __future__ import annotations

from collections.abc import Mapping


class RequestContext:
    """Carries the session token used to authorize outgoing requests.

    Each instance is independent; whoever owns the session calls
    `set_token` on sign-in, refresh and sign-out.
    """

    def __init__(self, *, base_url: str = "", token: str | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._token: str | None = None
        self.set_token(token)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def set_token(self, token: str | None) -> None:
        """Replace the session token; blank values clear it."""
        if token is None:
            self._token = None
            return
        normalized = token.strip()
        self._token = normalized or None

    def headers(self, extra: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return a fresh header mapping for one request."""
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if extra:
            headers.update(extra)
        if self._token is not None:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def url(self, path: str) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self._base_url}{path}"
