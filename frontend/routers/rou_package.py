from fastapi import APIRouter, Depends
from typing import List
from frontend.configuration.upstream import get_api_client
from frontend.dependencies.dep_auth import get_current_photographer
from frontend.models.mod_auth import ClientSession
from frontend.models.mod_package import Package
from frontend.schemas.sch_notification import ErrorDetail
from frontend.schemas.sch_package import PackageCreate, PackageUpdate
from frontend.services.svc_api import ApiClient
from frontend.services.svc_package import PackageService

router = APIRouter(
    prefix="/packages",
    tags=["Packages"],
    responses={404: {"model": ErrorDetail}},
)

@router.get('/', response_model=List[Package])
async def list_packages(
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """All packages of the logged-in photographer, active or not."""
    return await PackageService.get_photographer_packages(api, current)

@router.post('/', response_model=Package, responses={400: {"model": ErrorDetail}})
async def create_package(
    package: PackageCreate,
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """
    Create a package.

    - Name and duration are required
    - Description between 1 and 500 characters
    - Price must be greater than 0
    """
    return await PackageService.create_package(api, current, package)

@router.put('/{package_id}', response_model=Package, responses={400: {"model": ErrorDetail}})
async def update_package(
    package_id: str,
    package: PackageUpdate,
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """
    Edit a package. Bookings already made keep the price they were made at.
    """
    return await PackageService.update_package(api, current, package_id, package)

@router.delete('/{package_id}', status_code=204)
async def delete_package(
    package_id: str,
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """Delete a package."""
    await PackageService.delete_package(api, current, package_id)
