from pydantic import BaseModel, ConfigDict, Field

from ..common.validation import NonBlankStr, Price


class ItemInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: NonBlankStr = Field(alias="nombre")
    price: Price = Field(alias="precio")


class ItemView(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str = Field(alias="nombre")
    price: float = Field(alias="precio")
