"""Product Schemas — wire format of a product record and documented request bodies.

Invariants:
    - ProductResponse serializes timestamps as createdAt / updatedAt (camelCase wire names)
    - ProductCreate / ProductUpdate are documentation-only (OpenAPI requestBody)
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from product_api.core.repository_protocols import ProductLike


class ProductResponse(BaseModel):
    """Product record as returned under the `data` key."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(examples=[1])
    name: str = Field(examples=["Curved monitor 49\""])
    price: float = Field(examples=[300])
    availability: bool = Field(examples=[True])
    created_at: datetime | None = Field(
        None, serialization_alias="createdAt",
    )
    updated_at: datetime | None = Field(
        None, serialization_alias="updatedAt",
    )


class ProductCreate(BaseModel):
    """Body of POST /api/products."""
    name: str = Field(min_length=1, examples=["Curved monitor 49\""])
    price: float = Field(gt=0, examples=[399])
    availability: bool = Field(True, examples=[True])


class ProductUpdate(BaseModel):
    """Body of PUT /api/products/{id}: every field is overwritten."""
    name: str = Field(min_length=1, examples=["Curved monitor 49\""])
    price: float = Field(gt=0, examples=[399])
    availability: bool = Field(examples=[True])


class ProductEnvelope(BaseModel):
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    data: list[ProductResponse]


class MessageEnvelope(BaseModel):
    message: str = Field(examples=["product deleted"])


class ValidationErrorEntry(BaseModel):
    type: str = Field(examples=["field"])
    value: Any = None
    msg: str = Field(examples=["invalid ID"])
    path: str | None = Field(None, examples=["id"])
    location: str = Field(examples=["params"])


class ValidationErrorEnvelope(BaseModel):
    errors: list[ValidationErrorEntry]


def serialize_product(product: ProductLike) -> dict:
    """Shape one record for the JSON body."""
    return ProductResponse.model_validate(product).model_dump(
        mode="json", by_alias=True,
    )
