from typing import List, Optional
from frontend.configuration.config import Config
from frontend.configuration.monitor import log_event, log_exception, start_span
from frontend.models.mod_auth import ClientSession
from frontend.models.mod_portfolio import Portfolio
from frontend.schemas.sch_portfolio import PortfolioCreate
from frontend.services.svc_api import ApiClient, ApiError
from frontend.validators.val_portfolio import PortfolioValidator

def full_image_url(image_path: Optional[str], default: str = "") -> str:
    """Absolute URL for a media path served by the API server"""
    if not image_path:
        return default
    if image_path.startswith("http"):
        return image_path
    return f"{Config.api_server_root()}{image_path}"

class PortfolioService:
    @staticmethod
    def _with_full_urls(portfolio: Portfolio) -> Portfolio:
        for image in portfolio.images:
            image.url = full_image_url(image.url)
        return portfolio

    @staticmethod
    def _to_portfolios(data) -> List[Portfolio]:
        return [PortfolioService._with_full_urls(Portfolio(**item)) for item in (data or [])]

    @staticmethod
    async def get_photographer_portfolios(api: ApiClient, session: ClientSession) -> List[Portfolio]:
        """Portfolios of the logged-in photographer, published or not"""
        try:
            with start_span("get_photographer_portfolios", attributes={"user_id": session.user_id}):
                data = await api.get("/portfolio", token=session.token, context="get_photographer_portfolios")
                return PortfolioService._to_portfolios(data)
        except Exception as e:
            log_exception(e, {"operation": "get_photographer_portfolios", "user_id": session.user_id})
            raise

    @staticmethod
    async def _read_back(api: ApiClient, session: ClientSession, portfolio_id: str, data, context: str) -> Portfolio:
        """The portfolio the API replied with, or a fresh read of it when the reply was empty"""
        if data:
            return PortfolioService._with_full_urls(Portfolio(**data))
        for portfolio in await PortfolioService.get_photographer_portfolios(api, session):
            if portfolio.id == portfolio_id:
                return portfolio
        ApiError.raise_http_exception(404, ApiError.NOT_FOUND, "Portfolio not found", context=context)

    @staticmethod
    async def get_public_portfolios(api: ApiClient, photographer_id: str) -> List[Portfolio]:
        try:
            with start_span("get_public_portfolios", attributes={"photographer_id": photographer_id}):
                data = await api.get(f"/portfolio/photographer/{photographer_id}", context="get_public_portfolios")
                return PortfolioService._to_portfolios(data)
        except Exception as e:
            log_exception(e, {"operation": "get_public_portfolios", "photographer_id": photographer_id})
            raise

    @staticmethod
    async def create_portfolio(api: ApiClient, session: ClientSession, portfolio: PortfolioCreate) -> Portfolio:
        try:
            with start_span("create_portfolio", attributes={"user_id": session.user_id}):
                log_event("Create portfolio started", {"user_id": session.user_id, "title": portfolio.title})
                data = await api.post("/portfolio", token=session.token, json=portfolio.dict(), context="create_portfolio")
                # An empty reply still means the portfolio was stored as sent
                created = PortfolioService._with_full_urls(
                    Portfolio(**data) if data else Portfolio(**portfolio.dict(), photographer=session.user_id)
                )
                log_event("Portfolio created successfully", {"portfolio_id": created.id})
                return created
        except Exception as e:
            log_exception(e, {"operation": "create_portfolio", "user_id": session.user_id})
            raise

    @staticmethod
    async def upload_portfolio_images(
        api: ApiClient,
        session: ClientSession,
        portfolio_id: str,
        files: List[tuple],
        captions: Optional[List[str]] = None
    ) -> Portfolio:
        """
        Upload images into a portfolio.

        Args:
            files: (filename, content_type, content bytes) tuples
            captions: optional captions, matched to files by position
        """
        try:
            with start_span("upload_portfolio_images", attributes={"portfolio_id": portfolio_id}):
                PortfolioValidator.validate_upload(files)
                log_event("Upload images started", {"portfolio_id": portfolio_id, "count": len(files)})

                multipart = [("images", (name, content, content_type)) for name, content_type, content in files]
                form = {"captions": captions} if captions else None
                data = await api.post(
                    f"/portfolio/{portfolio_id}/images",
                    token=session.token,
                    files=multipart,
                    data=form,
                    context="upload_portfolio_images"
                )
                updated = await PortfolioService._read_back(api, session, portfolio_id, data, "upload_portfolio_images")
                log_event("Images uploaded successfully", {"portfolio_id": portfolio_id, "images": len(updated.images)})
                return updated
        except Exception as e:
            log_exception(e, {"operation": "upload_portfolio_images", "portfolio_id": portfolio_id})
            raise

    @staticmethod
    async def delete_image(api: ApiClient, session: ClientSession, portfolio_id: str, image_id: str) -> Portfolio:
        try:
            with start_span("delete_portfolio_image", attributes={"portfolio_id": portfolio_id, "image_id": image_id}):
                data = await api.delete(
                    f"/portfolio/{portfolio_id}/images/{image_id}",
                    token=session.token,
                    context="delete_portfolio_image"
                )
                log_event("Image deleted successfully", {"portfolio_id": portfolio_id, "image_id": image_id})
                return await PortfolioService._read_back(api, session, portfolio_id, data, "delete_portfolio_image")
        except Exception as e:
            log_exception(e, {"operation": "delete_portfolio_image", "portfolio_id": portfolio_id})
            raise
