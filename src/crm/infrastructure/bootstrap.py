"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from crm.domain.exceptions import AuthenticationError
from crm.infrastructure.config import Settings, load_settings
from crm.infrastructure.http.api_client import ApiClient
from crm.infrastructure.http.http_auth_gateway import HttpAuthGateway
from crm.infrastructure.http.http_customer_repository import HttpCustomerRepository
from crm.infrastructure.http.http_item_repository import HttpItemRepository
from crm.infrastructure.http.http_order_repository import HttpOrderRepository
from crm.infrastructure.persistence.json_session_store import JsonSessionStore


def session_store(settings: Settings | None = None) -> JsonSessionStore:
    settings = settings or load_settings()
    return JsonSessionStore(settings.session_file)


def auth_gateway(settings: Settings | None = None) -> HttpAuthGateway:
    settings = settings or load_settings()
    return HttpAuthGateway(ApiClient(settings.api_url, timeout=settings.http_timeout))


def authorized_client(settings: Settings | None = None) -> ApiClient:
    """Client carrying the stored bearer token; the login gate."""
    settings = settings or load_settings()
    token = session_store(settings).load_token()
    if not token:
        raise AuthenticationError("Not logged in. Run 'crm login' first.")
    return ApiClient(settings.api_url, token=token, timeout=settings.http_timeout)


def customer_repository(client: ApiClient) -> HttpCustomerRepository:
    return HttpCustomerRepository(client)


def item_repository(client: ApiClient) -> HttpItemRepository:
    return HttpItemRepository(client)


def order_repository(client: ApiClient) -> HttpOrderRepository:
    return HttpOrderRepository(client)
