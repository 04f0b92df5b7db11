"""Restaurant and menu schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from slooze_schemas.auth import Country


class MenuItem(BaseModel):
    """A single dish on a restaurant's menu."""

    id: str
    name: str
    price: Decimal


class Restaurant(BaseModel):
    """A restaurant with its menu, as listed by GET /restaurants."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    country: Country
    created_at: datetime | None = Field(default=None, alias="createdAt")
    menu_items: list[MenuItem] = Field(default_factory=list, alias="menuItems")

    def get_menu_item(self, item_id: str) -> MenuItem | None:
        """Find a menu item by ID, or None."""
        for item in self.menu_items:
            if item.id == item_id:
                return item
        return None


class PageMeta(BaseModel):
    """Pagination block returned alongside a page of restaurants."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    page: int = 1
    limit: int = 0
    total_pages: int = Field(default=1, alias="totalPages")
    has_next_page: bool = Field(default=False, alias="hasNextPage")
    has_prev_page: bool = Field(default=False, alias="hasPrevPage")


class RestaurantPage(BaseModel):
    """One page of restaurants."""

    data: list[Restaurant] = Field(default_factory=list)
    meta: PageMeta = Field(default_factory=PageMeta)

    def get_restaurant(self, restaurant_id: str) -> Restaurant | None:
        """Find a restaurant on this page by ID, or None."""
        for restaurant in self.data:
            if restaurant.id == restaurant_id:
                return restaurant
        return None


class RestaurantCreate(BaseModel):
    """Body for POST /restaurants."""

    name: str = Field(min_length=1)
    country: Country


class MenuItemCreate(BaseModel):
    """Body for POST /items."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0, max_digits=12)
    restaurant_id: str = Field(alias="restaurantId")
