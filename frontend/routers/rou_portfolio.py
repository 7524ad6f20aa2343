from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import List, Optional
from frontend.configuration.upstream import get_api_client
from frontend.dependencies.dep_auth import get_current_photographer
from frontend.models.mod_auth import ClientSession
from frontend.models.mod_portfolio import Portfolio
from frontend.schemas.sch_notification import ErrorDetail
from frontend.schemas.sch_portfolio import PortfolioCreate
from frontend.services.svc_api import ApiClient
from frontend.services.svc_portfolio import PortfolioService

router = APIRouter(
    prefix="/portfolio",
    tags=["Portfolio"],
    responses={404: {"model": ErrorDetail}},
)

@router.get('/', response_model=List[Portfolio])
async def list_portfolios(
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """Portfolios of the logged-in photographer, published or not."""
    return await PortfolioService.get_photographer_portfolios(api, current)

@router.post('/', response_model=Portfolio, responses={400: {"model": ErrorDetail}})
async def create_portfolio(
    portfolio: PortfolioCreate,
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """Create an empty portfolio; images are added with the upload view."""
    return await PortfolioService.create_portfolio(api, current, portfolio)

@router.post('/{portfolio_id}/images', response_model=Portfolio, responses={400: {"model": ErrorDetail}})
async def upload_images(
    portfolio_id: str,
    images: List[UploadFile] = File(...),
    captions: Optional[List[str]] = Form(default=None),
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """
    Upload images into a portfolio.

    - JPG, PNG, WebP or GIF only
    - Each file at most 10MB
    - Captions are matched to images by position
    """
    files = [(image.filename, image.content_type, await image.read()) for image in images]
    return await PortfolioService.upload_portfolio_images(api, current, portfolio_id, files, captions)

@router.delete('/{portfolio_id}/images/{image_id}', response_model=Portfolio)
async def delete_image(
    portfolio_id: str,
    image_id: str,
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """Remove one image from a portfolio."""
    return await PortfolioService.delete_image(api, current, portfolio_id, image_id)
