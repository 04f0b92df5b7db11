"""Order and payment schemas."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class OrderStatus(str, Enum):
    """Order lifecycle status, owned by the API."""

    PENDING = "PENDING"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


class PaymentType(str, Enum):
    """Payment methods a member can choose from."""

    CASH = "CASH"
    UPI = "UPI"
    CARD = "CARD"
    NETBANKING = "NETBANKING"

    @property
    def label(self) -> str:
        return PAYMENT_TYPE_LABELS[self]


PAYMENT_TYPE_LABELS = {
    PaymentType.CASH: "Cash on Delivery",
    PaymentType.UPI: "UPI",
    PaymentType.CARD: "Card",
    PaymentType.NETBANKING: "Net Banking",
}


# =============================================================================
# Payment
# =============================================================================


class PaymentRequest(BaseModel):
    """
    Payment method plus its details.

    Details per type:
        CASH       -> {}
        UPI        -> {"upiId": ...}
        CARD       -> {"cardNumber": ...}
        NETBANKING -> {"bankName": ...}
    """

    type: PaymentType
    details: dict[str, str] = Field(default_factory=dict)


class PaymentMethod(BaseModel):
    """Payment method recorded on an order."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    type: PaymentType
    details: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = Field(default=None, alias="createdAt")


# =============================================================================
# Order Create
# =============================================================================


class OrderLine(BaseModel):
    """A cart line as sent to POST /orders."""

    model_config = ConfigDict(populate_by_name=True)

    menu_item_id: str = Field(alias="menuItemId")
    quantity: int = Field(ge=1)
    restaurant_id: str | None = Field(default=None, alias="restaurantId")


class OrderCreateRequest(BaseModel):
    """Body for POST /orders."""

    items: list[OrderLine] = Field(min_length=1)
    payment: PaymentRequest


class OrderCreated(BaseModel):
    """Response of POST /orders. Only the ID is needed to continue to payment."""

    id: str | None = None


# =============================================================================
# Order Read
# =============================================================================


class OrderRestaurant(BaseModel):
    name: str
    country: str = ""


class OrderMenuItem(BaseModel):
    name: str
    restaurant: OrderRestaurant


class OrderItem(BaseModel):
    """A line on a placed order."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    quantity: int
    price: Decimal = Decimal("0")
    menu_item: OrderMenuItem = Field(alias="menuItem")


class OrderUser(BaseModel):
    """The user who placed the order."""

    name: str = ""
    email: str = ""
    country: str = ""


class Order(BaseModel):
    """An order as returned by GET /orders and GET /orders/:id."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user: OrderUser = Field(default_factory=OrderUser)
    items: list[OrderItem] = Field(default_factory=list)
    total_amount: Decimal = Field(default=Decimal("0"), alias="totalAmount")
    status: OrderStatus
    created_at: datetime | None = Field(default=None, alias="createdAt")
    payment_method: PaymentMethod | None = Field(default=None, alias="paymentMethod")

    @property
    def short_id(self) -> str:
        return f"{self.id[:8]}..."

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    @property
    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED
