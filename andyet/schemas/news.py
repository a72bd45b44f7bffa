from typing import Optional

from pydantic import BaseModel, Field


class MarketPlaceRef(BaseModel):
    id: int = Field(..., description="Marketplace identifier")
    name: Optional[str] = Field(None, description="Marketplace name, filled in from the store on responses")

    class Config:
        from_attributes = True


class NewsRequest(BaseModel):
    id: Optional[int] = Field(None, description="Must be empty on creation")
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    market_place: MarketPlaceRef = Field(..., alias="marketPlace")

    class Config:
        populate_by_name = True


class NewsResponse(BaseModel):
    id: int
    title: str
    content: str
    market_place: MarketPlaceRef = Field(..., alias="marketPlace")

    class Config:
        from_attributes = True
        populate_by_name = True
