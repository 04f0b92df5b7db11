"""Slooze Schemas - Pydantic models for the ordering API contracts."""

from slooze_schemas.auth import Country, LoginRequest, Role, UserInfo
from slooze_schemas.cart import CartItem
from slooze_schemas.orders import (
    Order,
    OrderCreated,
    OrderCreateRequest,
    OrderItem,
    OrderLine,
    OrderMenuItem,
    OrderRestaurant,
    OrderStatus,
    OrderUser,
    PaymentMethod,
    PaymentRequest,
    PaymentType,
)
from slooze_schemas.restaurants import (
    MenuItem,
    MenuItemCreate,
    PageMeta,
    Restaurant,
    RestaurantCreate,
    RestaurantPage,
)

__all__ = [
    # Auth
    "Country",
    "LoginRequest",
    "Role",
    "UserInfo",
    # Restaurants
    "MenuItem",
    "MenuItemCreate",
    "PageMeta",
    "Restaurant",
    "RestaurantCreate",
    "RestaurantPage",
    # Orders
    "Order",
    "OrderCreated",
    "OrderCreateRequest",
    "OrderItem",
    "OrderLine",
    "OrderMenuItem",
    "OrderRestaurant",
    "OrderStatus",
    "OrderUser",
    "PaymentMethod",
    "PaymentRequest",
    "PaymentType",
    # Cart
    "CartItem",
]
