from pydantic import BaseModel, Field
from typing import Optional

class PortfolioCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    category: str = Field(min_length=1)
    isPublished: bool = True
