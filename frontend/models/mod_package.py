from pydantic import BaseModel, Field
from typing import Optional, List, Union, Dict, Any
from datetime import datetime

class Package(BaseModel):
    id: Optional[str] = Field(default=None, alias="_id")
    photographer: Union[str, Dict[str, Any], None] = None
    name: str
    description: Optional[str] = None
    price: float
    duration: Optional[str] = None
    includes: List[str] = []
    isActive: bool = True
    createdAt: Optional[datetime] = None

    class Config:
        from_attributes = True
        populate_by_name = True
