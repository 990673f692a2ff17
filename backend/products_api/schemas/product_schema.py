from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Matches the Numeric(15, 2) column. Fifteen significant digits always survive
# the float conversion below, so unitPrice goes out as an exact JSON number.
Price = Annotated[
    Decimal,
    Field(max_digits=15, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductBase(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )
    product_name: Optional[str] = None
    unit_price: Price = Decimal(0)


class ProductIn(ProductBase):
    id: Optional[int] = None


class ProductUpdate(ProductBase):
    id: int


class ProductOut(ProductBase):
    id: int
