"""Request and response schemas for the order endpoints.

Aliases carry the public API field names (``cliente``, ``productos``,
``nombre``, ``precio``, ``estado``); attribute names are English. Dump with
``by_alias=True`` to get the wire shape.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..common.validation import NonBlankStr, Price, TrimmedStr
from .status import OrderStatus


class LineItemInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Stored as submitted: the line item is a snapshot
    name: NonBlankStr = Field(alias="nombre")
    price: Price = Field(alias="precio")


class NewOrder(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    customer_name: TrimmedStr = Field(alias="cliente")
    items: List[LineItemInput] = Field(alias="productos", min_length=1)


class StatusChange(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: OrderStatus = Field(alias="estado")


class OrderSummary(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    customer_name: str = Field(alias="cliente")
    status: str = Field(alias="estado")
    items: List[LineItemInput] = Field(alias="productos", default_factory=list)
