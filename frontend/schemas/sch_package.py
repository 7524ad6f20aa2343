from pydantic import BaseModel, Field, validator
from typing import Optional, List

class PackageCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1, max_length=500)
    price: float = Field(gt=0, description="Price must be greater than 0")
    duration: str = Field(min_length=1)
    includes: List[str] = []
    isActive: bool = True

    @validator('includes')
    def drop_blank_inclusions(cls, v):
        return [item.strip() for item in v if item and item.strip()]

class PackageUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1, max_length=500)
    price: Optional[float] = Field(default=None, gt=0)
    duration: Optional[str] = Field(default=None, min_length=1)
    includes: Optional[List[str]] = None
    isActive: Optional[bool] = None

    @validator('includes')
    def drop_blank_inclusions(cls, v):
        if v is None:
            return v
        return [item.strip() for item in v if item and item.strip()]
