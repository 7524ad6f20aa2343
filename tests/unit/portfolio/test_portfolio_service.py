import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from datetime import datetime, timezone
from fastapi import HTTPException

from frontend.configuration.config import Config
from frontend.models.mod_auth import ClientSession, SessionUser, UserRole
from frontend.schemas.sch_portfolio import PortfolioCreate
from frontend.services.svc_portfolio import PortfolioService, full_image_url
from frontend.validators.val_portfolio import PortfolioValidator, PortfolioValidationError

def make_session():
    return ClientSession(
        token="token-abc",
        user=SessionUser(id="photographer456", role=UserRole.PHOTOGRAPHER),
        issued_at=datetime.now(timezone.utc)
    )

def portfolio_item(images=None):
    return {
        "_id": "portfolio1",
        "photographer": "photographer456",
        "title": "Weddings",
        "category": "wedding",
        "images": images or [],
    }

class TestImageUrls:
    def test_relative_path_gets_server_root(self):
        with patch.object(Config, 'API_BASE_URL', "http://localhost:5000/api"):
            assert full_image_url("/uploads/a.jpg") == "http://localhost:5000/uploads/a.jpg"

    def test_absolute_url_is_kept(self):
        assert full_image_url("https://cdn.example.com/a.jpg") == "https://cdn.example.com/a.jpg"

    def test_missing_image_uses_default(self):
        assert full_image_url(None, "default.jpg") == "default.jpg"

class TestPortfolioValidator:
    def test_accepts_images(self):
        PortfolioValidator.validate_upload([
            ("a.jpg", "image/jpeg", b"x" * 10),
            ("b.png", "image/png", b"x" * 10),
        ])

    def test_rejects_non_image(self):
        with pytest.raises(PortfolioValidationError) as exc_info:
            PortfolioValidator.validate_upload([("notes.pdf", "application/pdf", b"x")])

        assert exc_info.value.status_code == 400
        assert "notes.pdf" in exc_info.value.detail["message"]

    def test_rejects_large_file(self):
        with patch.object(Config, 'MAX_IMAGE_UPLOAD_MB', 1):
            with pytest.raises(PortfolioValidationError) as exc_info:
                PortfolioValidator.validate_upload([("big.jpg", "image/jpeg", b"x" * (1024 * 1024 + 1))])

        assert "1MB" in exc_info.value.detail["message"]

    def test_rejects_empty_batch(self):
        with pytest.raises(PortfolioValidationError):
            PortfolioValidator.validate_upload([])

class TestPortfolioService:
    @pytest.fixture
    def mock_api(self):
        api = MagicMock()
        api.get = AsyncMock()
        api.post = AsyncMock()
        api.delete = AsyncMock()
        return api

    @pytest.mark.asyncio
    async def test_get_portfolios_resolves_image_urls(self, mock_api):
        mock_api.get.return_value = [portfolio_item([{"_id": "img1", "url": "/uploads/a.jpg"}])]

        with patch.object(Config, 'API_BASE_URL', "http://localhost:5000/api"):
            result = await PortfolioService.get_photographer_portfolios(mock_api, make_session())

        assert result[0].images[0].url == "http://localhost:5000/uploads/a.jpg"

    @pytest.mark.asyncio
    async def test_upload_images(self, mock_api):
        mock_api.post.return_value = portfolio_item([{"_id": "img1", "url": "https://cdn.example.com/a.jpg"}])

        result = await PortfolioService.upload_portfolio_images(
            mock_api, make_session(), "portfolio1", [("a.jpg", "image/jpeg", b"data")], ["First dance"]
        )

        assert len(result.images) == 1
        kwargs = mock_api.post.call_args.kwargs
        assert kwargs["files"] == [("images", ("a.jpg", b"data", "image/jpeg"))]
        assert kwargs["data"] == {"captions": ["First dance"]}
        assert mock_api.post.call_args.args[0] == "/portfolio/portfolio1/images"

    @pytest.mark.asyncio
    async def test_upload_invalid_file_never_reaches_api(self, mock_api):
        with pytest.raises(PortfolioValidationError):
            await PortfolioService.upload_portfolio_images(
                mock_api, make_session(), "portfolio1", [("a.txt", "text/plain", b"data")]
            )

        mock_api.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_portfolio_with_empty_reply(self, mock_api):
        mock_api.post.return_value = None

        result = await PortfolioService.create_portfolio(
            mock_api, make_session(), PortfolioCreate(title="Weddings", category="wedding")
        )

        assert result.title == "Weddings"
        assert result.photographer == "photographer456"
        assert result.images == []

    @pytest.mark.asyncio
    async def test_upload_with_empty_reply_reads_portfolio_back(self, mock_api):
        mock_api.post.return_value = None
        mock_api.get.return_value = [portfolio_item([{"_id": "img1", "url": "https://cdn.example.com/a.jpg"}])]

        result = await PortfolioService.upload_portfolio_images(
            mock_api, make_session(), "portfolio1", [("a.jpg", "image/jpeg", b"data")]
        )

        assert result.id == "portfolio1"
        assert [image.id for image in result.images] == ["img1"]
        assert mock_api.get.call_args.args[0] == "/portfolio"

    @pytest.mark.asyncio
    async def test_delete_image_with_empty_reply(self, mock_api):
        mock_api.delete.return_value = None
        mock_api.get.return_value = [portfolio_item()]

        result = await PortfolioService.delete_image(mock_api, make_session(), "portfolio1", "img1")

        assert result.id == "portfolio1"
        assert result.images == []

    @pytest.mark.asyncio
    async def test_delete_image_with_empty_reply_and_portfolio_gone(self, mock_api):
        mock_api.delete.return_value = None
        mock_api.get.return_value = []

        with pytest.raises(HTTPException) as exc_info:
            await PortfolioService.delete_image(mock_api, make_session(), "portfolio1", "img1")

        assert exc_info.value.status_code == 404
