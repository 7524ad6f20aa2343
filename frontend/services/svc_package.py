from typing import List
from frontend.configuration.monitor import log_event, log_exception, log_metric, start_span
from frontend.models.mod_auth import ClientSession
from frontend.models.mod_package import Package
from frontend.schemas.sch_package import PackageCreate, PackageUpdate
from frontend.services.svc_api import ApiClient, ApiError

class PackageService:
    @staticmethod
    def _to_packages(data) -> List[Package]:
        return [Package(**item) for item in (data or [])]

    @staticmethod
    async def get_photographer_packages(api: ApiClient, session: ClientSession) -> List[Package]:
        """Packages owned by the logged-in photographer"""
        try:
            with start_span("get_photographer_packages", attributes={"user_id": session.user_id}):
                data = await api.get("/packages", token=session.token, context="get_photographer_packages")
                packages = PackageService._to_packages(data)
                log_metric("photographer_packages", len(packages), {"user_id": session.user_id})
                return packages
        except Exception as e:
            log_exception(e, {"operation": "get_photographer_packages", "user_id": session.user_id})
            raise

    @staticmethod
    async def _find_own_package(api: ApiClient, session: ClientSession, package_id: str, context: str) -> Package:
        for package in await PackageService.get_photographer_packages(api, session):
            if package.id == package_id:
                return package
        ApiError.raise_http_exception(404, ApiError.NOT_FOUND, "Package not found", context=context)

    @staticmethod
    async def get_public_packages(api: ApiClient, photographer_id: str) -> List[Package]:
        """Packages a photographer offers to clients, no session required"""
        try:
            with start_span("get_public_packages", attributes={"photographer_id": photographer_id}):
                data = await api.get(f"/packages/photographer/{photographer_id}", context="get_public_packages")
                return PackageService._to_packages(data)
        except Exception as e:
            log_exception(e, {"operation": "get_public_packages", "photographer_id": photographer_id})
            raise

    @staticmethod
    async def get_bookable_package(api: ApiClient, photographer_id: str, package_id: str) -> Package:
        """Look up the package a client selected; it must exist and be active"""
        packages = await PackageService.get_public_packages(api, photographer_id)
        for package in packages:
            if package.id == package_id:
                if not package.isActive:
                    ApiError.raise_http_exception(
                        400, ApiError.VALIDATION,
                        f"The package '{package.name}' is no longer offered",
                        context="create_booking"
                    )
                return package
        ApiError.raise_http_exception(
            400, ApiError.VALIDATION,
            "Please select one of the photographer's packages",
            context="create_booking"
        )

    @staticmethod
    async def create_package(api: ApiClient, session: ClientSession, package: PackageCreate) -> Package:
        try:
            with start_span("create_package", attributes={"user_id": session.user_id}):
                log_event("Create package started", {"user_id": session.user_id, "name": package.name})
                data = await api.post("/packages", token=session.token, json=package.dict(), context="create_package")
                # An empty reply still means the package was stored as sent
                created = Package(**data) if data else Package(**package.dict(), photographer=session.user_id)
                log_event("Package created successfully", {"package_id": created.id, "price": created.price})
                return created
        except Exception as e:
            log_exception(e, {"operation": "create_package", "user_id": session.user_id})
            raise

    @staticmethod
    async def update_package(api: ApiClient, session: ClientSession, package_id: str, package: PackageUpdate) -> Package:
        """
        Edit a package. Existing bookings keep the price they were created with;
        only bookings made after this edit see the new price.
        """
        try:
            with start_span("update_package", attributes={"package_id": package_id}):
                changes = package.dict(exclude_none=True)
                log_event("Update package started", {"package_id": package_id, "fields": ",".join(changes)})
                data = await api.put(
                    f"/packages/{package_id}", token=session.token, json=changes, context="update_package"
                )
                if data:
                    updated = Package(**data)
                else:
                    updated = await PackageService._find_own_package(api, session, package_id, "update_package")
                log_event("Package updated successfully", {"package_id": package_id})
                return updated
        except Exception as e:
            log_exception(e, {"operation": "update_package", "package_id": package_id})
            raise

    @staticmethod
    async def delete_package(api: ApiClient, session: ClientSession, package_id: str) -> None:
        try:
            with start_span("delete_package", attributes={"package_id": package_id}):
                await api.delete(f"/packages/{package_id}", token=session.token, context="delete_package")
                log_event("Package deleted successfully", {"package_id": package_id})
        except Exception as e:
            log_exception(e, {"operation": "delete_package", "package_id": package_id})
            raise
