"""Cart schemas - client-side cart lines kept in the session."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CartItem(BaseModel):
    """A menu item in the cart with the quantity the member wants."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    price: Decimal
    qty: int = Field(default=1, ge=1)
    restaurant_id: str | None = Field(default=None, alias="restaurantId")
    restaurant_name: str | None = Field(default=None, alias="restaurantName")

    @property
    def line_total(self) -> Decimal:
        return self.price * self.qty
