"""Application service: Login and Logout use cases."""

from __future__ import annotations

import logging

from crm.domain.exceptions import ValidationError
from crm.domain.repository.session_repository import AuthGateway, SessionRepository

logger = logging.getLogger(__name__)


class LoginHandler:

    def __init__(self, auth_gateway: AuthGateway, session_repo: SessionRepository) -> None:
        self._auth_gateway = auth_gateway
        self._session_repo = session_repo

    def handle(self, username: str, password: str) -> None:
        """Exchange credentials for a token and remember it.

        Rejected credentials surface as AuthenticationError from the
        gateway; nothing is stored in that case.
        """
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not password:
            raise ValidationError("Password is required")

        token = self._auth_gateway.login(username.strip(), password)
        self._session_repo.save_token(token)
        logger.info("Logged in as %s", username.strip())


class LogoutHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> None:
        self._session_repo.clear()
        logger.info("Session cleared")
