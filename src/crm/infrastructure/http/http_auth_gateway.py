"""AuthGateway backed by ``POST /api/login``."""

from __future__ import annotations

from crm.domain.exceptions import AuthenticationError
from crm.domain.repository.session_repository import AuthGateway
from crm.infrastructure.http.api_client import ApiClient, ApiError

LOGIN_PATH = "/api/login"


class HttpAuthGateway(AuthGateway):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def login(self, username: str, password: str) -> str:
        try:
            data = self._client.post(LOGIN_PATH, {"username": username, "password": password})
        except ApiError as exc:
            if exc.status_code is None:
                raise  # network failure, not a rejection
            raise AuthenticationError(exc.detail or "Invalid credentials") from exc

        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise AuthenticationError("Login response did not include a token")
        return str(token)
