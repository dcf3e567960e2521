"""Stored records and the shapes of revenue requests and replies."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass
class Customer:
    id: int = 0
    uuid: str = ""
    name: str = ""
    email: str = ""
    address: str = ""


@dataclass
class Product:
    id: int = 0
    uuid: str = ""
    name: str = ""
    category: str = ""
    description: str = ""


@dataclass
class Order:
    id: int = 0
    uuid: str = ""
    customer_uuid: str = ""
    date_of_sale: str = ""
    payment_method: str = ""
    shipping_cost: float = 0.0
    discount: float = 0.0


@dataclass
class OrderItem:
    id: int = 0
    uuid: str = ""
    order_uuid: str = ""
    product_uuid: str = ""
    quantity: int = 0
    unit_price: float = 0.0
    product: Product | None = None
    order: Order | None = None


@dataclass
class Region:
    order_uuid: str = ""
    region_name: str = ""


@dataclass(frozen=True)
class RevenueRequest:
    start_date: str = ""
    end_date: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RevenueRequest:
        """Build a request from decoded JSON; missing fields become empty strings."""
        values = {}
        for key in ("start_date", "end_date"):
            value = data.get(key) or ""
            if not isinstance(value, str):
                raise TypeError(f"{key} must be a string, not {type(value).__name__}")
            values[key] = value
        return cls(**values)


@dataclass
class Revenue:
    start_date: str = ""
    end_date: str = ""
    total_revenue: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class RevenueByProduct:
    total_revenue: float = 0.0
    product_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class RevenueByCategory:
    total_revenue: float = 0.0
    category: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class RevenueByRegion:
    total_revenue: float = 0.0
    region_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"total_revenue": self.total_revenue, "region": self.region_name}