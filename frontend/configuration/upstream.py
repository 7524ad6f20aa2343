from frontend.configuration.config import Config
from frontend.services.svc_api import ApiClient

# Shared client for the marketplace REST API
api_client = ApiClient(
    base_url=Config.API_BASE_URL,
    timeout=Config.API_TIMEOUT_SECONDS
)

def get_api_client() -> ApiClient:
    """Dependency that provides the upstream API client."""
    return api_client
