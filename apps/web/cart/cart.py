"""
Session cart - the member's basket before an order is placed.

Lines are stored in the session as JSON-safe dicts and keyed by
(menu item ID, restaurant ID), so the same dish from two restaurants stays
on two lines.
"""

import logging
from collections.abc import Iterator
from decimal import Decimal, InvalidOperation
from typing import Any

from django.conf import settings
from django.contrib.sessions.backends.base import SessionBase

from pydantic import ValidationError as PydanticValidationError
from slooze_schemas import CartItem, MenuItem, OrderLine, Restaurant

logger = logging.getLogger(__name__)


class Cart:
    """A list of CartItem backed by the request session."""

    def __init__(self, session: SessionBase) -> None:
        self.session = session
        self.session_key = settings.CART_SESSION_KEY
        self._items = self._load(session.get(self.session_key))

    # =========================================================================
    # Reading
    # =========================================================================

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[CartItem]:
        return list(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def total(self) -> Decimal:
        """Sum of price x qty over every line."""
        return sum((item.line_total for item in self._items), Decimal("0"))

    def get(self, item_id: str, restaurant_id: str | None) -> CartItem | None:
        for item in self._items:
            if item.id == item_id and item.restaurant_id == restaurant_id:
                return item
        return None

    def order_lines(self) -> list[OrderLine]:
        """Cart lines in the shape POST /orders expects."""
        return [
            OrderLine(
                menu_item_id=item.id,
                quantity=item.qty,
                restaurant_id=item.restaurant_id,
            )
            for item in self._items
        ]

    # =========================================================================
    # Writing
    # =========================================================================

    def add(self, item: MenuItem, restaurant: Restaurant, qty: int = 1) -> CartItem:
        """
        Add ``qty`` of a menu item, merging with an existing line.

        Quantities below 1 are treated as 1.
        """
        qty = max(qty, 1)
        existing = self.get(item.id, restaurant.id)
        if existing is not None:
            existing.qty += qty
            line = existing
        else:
            line = CartItem(
                id=item.id,
                name=item.name,
                price=item.price,
                qty=qty,
                restaurant_id=restaurant.id,
                restaurant_name=restaurant.name,
            )
            self._items.append(line)
        self.save()
        return line

    def increase(self, item_id: str, restaurant_id: str | None) -> None:
        item = self.get(item_id, restaurant_id)
        if item is not None:
            item.qty += 1
            self.save()

    def decrease(self, item_id: str, restaurant_id: str | None) -> None:
        """Lower a line's quantity by one; a line never drops below 1."""
        item = self.get(item_id, restaurant_id)
        if item is not None and item.qty > 1:
            item.qty -= 1
            self.save()

    def remove(self, item_id: str, restaurant_id: str | None) -> None:
        self._items = [
            item
            for item in self._items
            if not (item.id == item_id and item.restaurant_id == restaurant_id)
        ]
        self.save()

    def clear(self) -> None:
        self._items = []
        self.session.pop(self.session_key, None)
        self.session.modified = True

    def save(self) -> None:
        self.session[self.session_key] = [
            item.model_dump(mode="json", by_alias=True) for item in self._items
        ]
        self.session.modified = True

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _load(raw: Any) -> list[CartItem]:
        """Normalize stored lines; anything unreadable yields an empty cart."""
        if not raw:
            return []
        if not isinstance(raw, list):
            logger.warning("Discarding malformed cart payload: %r", type(raw))
            return []

        try:
            return [
                CartItem(
                    id=str(entry["id"]),
                    name=str(entry["name"]),
                    price=Decimal(str(entry["price"])),
                    qty=max(int(entry.get("qty") or 1), 1),
                    restaurant_id=str(entry["restaurantId"]),
                    restaurant_name=entry.get("restaurantName"),
                )
                for entry in raw
            ]
        except (
            KeyError,
            TypeError,
            ValueError,
            AttributeError,
            InvalidOperation,
            PydanticValidationError,
        ):
            logger.warning("Discarding unreadable cart payload")
            return []
