from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any

class Review(BaseModel):
    id: Optional[str] = Field(default=None, alias="_id")
    clientName: Optional[str] = None
    rating: Optional[float] = None
    comment: Optional[str] = None
    date: Optional[str] = None

    class Config:
        populate_by_name = True

class Photographer(BaseModel):
    id: str = Field(alias="_id")
    fullName: str
    email: Optional[str] = None
    specialty: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    categories: List[str] = []
    price: Optional[float] = None
    profileImage: Optional[str] = None
    image: Optional[str] = None  # resolved, absolute profile image URL
    rating: Optional[float] = None
    reviews: List[Review] = []
    availability: Optional[Dict[str, Any]] = None

    class Config:
        from_attributes = True
        populate_by_name = True
