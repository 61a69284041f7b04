from pydantic import BaseModel, Field


class RateOrderRequest(BaseModel):
    rating: int = Field(ge=1, le=5)
