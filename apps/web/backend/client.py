"""Ordering API client - cookie-authenticated calls to the Slooze REST API."""

import logging
import time
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from slooze_schemas import (
    LoginRequest,
    MenuItemCreate,
    Order,
    OrderCreated,
    OrderCreateRequest,
    PaymentRequest,
    RestaurantCreate,
    RestaurantPage,
    UserInfo,
)

from apps.web.backend.exceptions import (
    BackendAPIError,
    BackendAuthError,
    BackendConnectionError,
    BackendResponseError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

TOKEN_COOKIE = "access_token"

_ORDER_LIST = TypeAdapter(list[Order])


class SloozeClient:
    """
    Synchronous client for the ordering API.

    The API authenticates with an ``access_token`` cookie. The client forwards
    the token it was built with on every request, the same way a browser would
    with ``credentials: "include"``.

    Failures are never retried:
    - transport errors raise BackendConnectionError
    - non-2xx responses raise BackendAPIError (BackendAuthError on a refused login)
    - unparseable payloads raise BackendResponseError
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        token_cookie: str = TOKEN_COOKIE,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Root URL of the API, e.g. http://localhost:8080
            token: Access token to forward as a cookie, if logged in.
            http_client: Optional HTTP client for dependency injection (testing).
            timeout: Request timeout in seconds.
            token_cookie: Name of the cookie carrying the token.
        """
        self._base_url = base_url.rstrip("/")
        self._client = http_client or httpx.Client(timeout=timeout)
        self._owns_client = http_client is None
        self._token_cookie = token_cookie
        self.token = token
        # Seconds until the API expires the token, None for a session cookie
        self.token_max_age: int | None = None

    def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SloozeClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # =========================================================================
    # Authentication
    # =========================================================================

    def login(self, email: str, password: str) -> str:
        """
        POST /auth/login

        Returns:
            The access token issued by the API. Its cookie lifetime, if the
            API set one, is left on ``token_max_age``.

        Raises:
            BackendAuthError: If the credentials are rejected (409).
            BackendAPIError: For any other error status.
        """
        body = LoginRequest(email=email, password=password)
        response = self._request("POST", "/auth/login", json=body.model_dump())

        token = response.cookies.get(self._token_cookie)
        if not token:
            token = self._token_from_body(response)
        if not token:
            raise BackendResponseError("Login succeeded but no access token was issued")

        self.token = token
        self.token_max_age = self._token_max_age(response)
        return token

    def me(self) -> UserInfo:
        """GET /auth/me"""
        response = self._request("GET", "/auth/me")
        return self._parse(UserInfo, response)

    def logout(self) -> None:
        """GET /auth/logout"""
        self._request("GET", "/auth/logout")
        self.token = None

    # =========================================================================
    # Restaurants
    # =========================================================================

    def list_restaurants(self, page: int = 1, limit: int = 3) -> RestaurantPage:
        """GET /restaurants?page=&limit="""
        response = self._request(
            "GET", "/restaurants", params={"page": page, "limit": limit}
        )
        return self._parse(RestaurantPage, response)

    def create_restaurant(self, restaurant: RestaurantCreate) -> dict[str, Any]:
        """POST /restaurants"""
        response = self._request(
            "POST", "/restaurants", json=restaurant.model_dump(mode="json")
        )
        return self._json(response)

    def create_menu_item(self, item: MenuItemCreate) -> dict[str, Any]:
        """POST /items"""
        payload = item.model_dump(mode="json", by_alias=True)
        # The API expects a JSON number, not a decimal string
        payload["price"] = float(item.price)
        response = self._request("POST", "/items", json=payload)
        return self._json(response)

    # =========================================================================
    # Orders
    # =========================================================================

    def create_order(self, order: OrderCreateRequest) -> OrderCreated:
        """POST /orders"""
        response = self._request(
            "POST", "/orders", json=order.model_dump(mode="json", by_alias=True)
        )
        return self._parse(OrderCreated, response)

    def list_orders(self) -> list[Order]:
        """GET /orders"""
        response = self._request("GET", "/orders")
        try:
            return _ORDER_LIST.validate_python(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise BackendResponseError(f"Unexpected order list payload: {e}") from e

    def get_order(self, order_id: str) -> Order:
        """GET /orders/:id"""
        response = self._request("GET", f"/orders/{order_id}")
        return self._parse(Order, response)

    def pay_order(self, order_id: str, payment: PaymentRequest) -> Order:
        """PATCH /orders/:id/pay"""
        response = self._request(
            "PATCH", f"/orders/{order_id}/pay", json=payment.model_dump(mode="json")
        )
        return self._parse(Order, response)

    def cancel_order(self, order_id: str) -> None:
        """PATCH /orders/:id/cancel"""
        self._request("PATCH", f"/orders/{order_id}/cancel")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Make a single HTTP request against the API.

        Raises:
            BackendConnectionError: If the request never got a response.
            BackendAuthError: If login credentials are rejected.
            BackendAPIError: If the API answered with an error status.
        """
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Cookie"] = f"{self._token_cookie}={self.token}"
        url = f"{self._base_url}{path}"

        try:
            response = self._client.request(method, url, headers=headers, **kwargs)
        except httpx.RequestError as e:
            logger.warning("Ordering API unreachable: %s %s: %s", method, path, e)
            raise BackendConnectionError(f"Could not reach ordering API: {e}") from e

        if response.is_success:
            return response

        detail = _server_message(response)
        message = detail or response.reason_phrase or f"HTTP {response.status_code}"
        logger.warning(
            "Ordering API error %d on %s %s: %s",
            response.status_code,
            method,
            path,
            message,
        )
        error_cls = (
            BackendAuthError
            if path == "/auth/login" and response.status_code == 409
            else BackendAPIError
        )
        raise error_cls(
            message,
            status_code=response.status_code,
            response_body=response.text,
            detail=detail,
        )

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise BackendResponseError(f"Invalid JSON from ordering API: {e}") from e
        return data if isinstance(data, dict) else {"data": data}

    @staticmethod
    def _parse(model: type[BaseModel], response: httpx.Response) -> Any:
        try:
            return model.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise BackendResponseError(
                f"Unexpected {model.__name__} payload: {e}"
            ) from e

    def _token_max_age(self, response: httpx.Response) -> int | None:
        for cookie in response.cookies.jar:
            if cookie.name == self._token_cookie and cookie.expires is not None:
                return max(int(cookie.expires - time.time()), 0)
        return None

    def _token_from_body(self, response: httpx.Response) -> str | None:
        try:
            data = response.json()
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        token = data.get(self._token_cookie) or data.get("accessToken")
        return str(token) if token else None


def _server_message(response: httpx.Response) -> str | None:
    """Pull the server-supplied ``message`` out of an error response."""
    try:
        data = response.json()
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None

    message = data.get("message") or data.get("error")
    if isinstance(message, list):
        return "; ".join(str(m) for m in message) or None
    return str(message) if message else None
