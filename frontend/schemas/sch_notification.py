from pydantic import BaseModel
from typing import Optional
from enum import Enum

class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"

class Notification(BaseModel):
    """Toast-style message shown to the caller after an action"""
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT

class ErrorDetail(BaseModel):
    code: str
    title: str
    message: str
    variant: NotificationVariant = NotificationVariant.DESTRUCTIVE
    context: Optional[str] = None
