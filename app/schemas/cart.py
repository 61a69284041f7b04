from pydantic import BaseModel, Field
from typing import Optional


class AddToCartRequest(BaseModel):
    product_id: int
    quantity: Optional[int] = Field(default=None, ge=0)


class UpdateCartRequest(BaseModel):
    product_id: int
    quantity: int


class RemoveFromCartRequest(BaseModel):
    product_id: int
