from fastapi import HTTPException
from typing import List, Optional
from frontend.configuration.config import Config
from frontend.services.svc_api import ApiError

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp", "image/gif"}

class PortfolioValidationError(HTTPException):
    def __init__(self, message: str):
        super().__init__(
            status_code=400,
            detail=ApiError.notification(ApiError.VALIDATION, message, context="upload_images")
        )

class PortfolioValidator:
    @staticmethod
    def max_bytes() -> int:
        return Config.MAX_IMAGE_UPLOAD_MB * 1024 * 1024

    @staticmethod
    def validate_image(filename: str, content_type: Optional[str], size: int):
        """Validate a single uploaded image: supported format and size limit"""
        if not content_type or content_type.lower() not in ALLOWED_IMAGE_TYPES:
            raise PortfolioValidationError(
                f"{filename} is not a supported image. Use JPG, PNG, WebP or GIF"
            )
        if size > PortfolioValidator.max_bytes():
            raise PortfolioValidationError(
                f"{filename} is larger than {Config.MAX_IMAGE_UPLOAD_MB}MB"
            )

    @staticmethod
    def validate_upload(files: List[tuple]):
        """
        Validate an upload batch.

        Args:
            files: (filename, content_type, content bytes) tuples
        """
        if not files:
            raise PortfolioValidationError("Please select at least one image to upload")
        for filename, content_type, content in files:
            PortfolioValidator.validate_image(filename, content_type, len(content))
