import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Config:
    # Marketplace REST API (system of record)
    API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api").rstrip("/")
    API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "15"))

    # Session / JWT Configuration
    # When no secret is configured the token claims are read without verification;
    # the upstream API remains the authority on token validity.
    JWT_SECRET_KEY = os.getenv("AUTH_SECRET_KEY")
    JWT_ALGORITHM = os.getenv("AUTH_ALGORITHM", "HS256")
    SESSION_TTL_MINUTES = int(os.getenv("SESSION_TTL_MINUTES", "1440"))

    # Booking rules
    RESCHEDULE_MIN_NOTICE_DAYS = int(os.getenv("RESCHEDULE_MIN_NOTICE_DAYS", "2"))
    DEFAULT_BOOKING_LOCATION = os.getenv("DEFAULT_BOOKING_LOCATION", "To be determined")

    # Media
    MAX_IMAGE_UPLOAD_MB = int(os.getenv("MAX_IMAGE_UPLOAD_MB", "10"))
    DEFAULT_PROFILE_IMAGE = os.getenv(
        "DEFAULT_PROFILE_IMAGE",
        "https://images.unsplash.com/photo-1568602471122-7832951cc4c5"
    )

    # Application Insights
    APPLICATIONINSIGHTS_CONNECTION_STRING = os.getenv("APPINSIGHTS_INSTRUMENTATIONKEY")

    @staticmethod
    def api_server_root() -> str:
        """Base server URL without the trailing /api segment, used for media paths"""
        base = Config.API_BASE_URL
        if base.endswith("/api"):
            return base[:-len("/api")]
        return base
