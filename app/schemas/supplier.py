from pydantic import BaseModel, Field, constr
from typing import List, Literal, Optional

Category = Literal[
    "rice", "pulses", "oil", "spices", "vegetables", "fruits",
    "dairy", "meat", "seafood", "grains", "condiments", "herbs",
]


class SupplierProfileRequest(BaseModel):
    business_name: constr(strip_whitespace=True, min_length=1, max_length=150)
    description: Optional[str] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    pincode: Optional[constr(pattern=r"^\d{6}$")] = None
    categories: List[Category] = []
    min_order_amount: float = Field(default=0, ge=0)
    delivery_time: Optional[str] = Field(default=None, max_length=50)
    image_url: Optional[str] = None


class AddProductRequest(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=150)
    description: Optional[str] = ""
    category: Category
    unit: constr(strip_whitespace=True, min_length=1, max_length=20)
    price_per_unit: float = Field(gt=0)
    minimum_quantity: int = Field(default=1, ge=1)
    stock_quantity: int = Field(default=0, ge=0)
    image_url: Optional[str] = None
    is_active: bool = True


class UpdateProductRequest(BaseModel):
    name: Optional[constr(strip_whitespace=True, min_length=1, max_length=150)] = None
    description: Optional[str] = None
    category: Optional[Category] = None
    unit: Optional[constr(strip_whitespace=True, min_length=1, max_length=20)] = None
    price_per_unit: Optional[float] = Field(default=None, gt=0)
    minimum_quantity: Optional[int] = Field(default=None, ge=1)
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    is_active: Optional[bool] = None
