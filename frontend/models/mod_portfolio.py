from pydantic import BaseModel, Field
from typing import Optional, List, Union, Dict, Any
from datetime import datetime

class PortfolioImage(BaseModel):
    id: Optional[str] = Field(default=None, alias="_id")
    url: str
    caption: Optional[str] = None
    isFeatured: bool = False
    uploadDate: Optional[datetime] = None

    class Config:
        populate_by_name = True

class Portfolio(BaseModel):
    id: Optional[str] = Field(default=None, alias="_id")
    photographer: Union[str, Dict[str, Any], None] = None
    title: str
    description: Optional[str] = None
    images: List[PortfolioImage] = []
    category: Optional[str] = None
    isPublished: bool = True
    views: int = 0
    createdAt: Optional[datetime] = None

    class Config:
        from_attributes = True
        populate_by_name = True
