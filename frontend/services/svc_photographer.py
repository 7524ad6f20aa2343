from typing import List
from frontend.configuration.config import Config
from frontend.configuration.monitor import log_event, log_exception, log_metric, start_span
from frontend.models.mod_auth import ClientSession
from frontend.models.mod_photographer import Photographer
from frontend.schemas.sch_photographer import PhotographerFilter, ProfileUpdate, AvailabilityUpdate
from frontend.services.svc_api import ApiClient, ApiError
from frontend.services.svc_portfolio import full_image_url

class PhotographerService:
    @staticmethod
    def _to_photographer(item: dict) -> Photographer:
        photographer = Photographer(**item)
        photographer.image = full_image_url(photographer.profileImage, Config.DEFAULT_PROFILE_IMAGE)
        return photographer

    @staticmethod
    def _to_photographers(data) -> List[Photographer]:
        return [PhotographerService._to_photographer(item) for item in (data or [])]

    @staticmethod
    async def get_all_photographers(api: ApiClient) -> List[Photographer]:
        try:
            with start_span("get_all_photographers"):
                data = await api.get("/photographers", context="get_all_photographers")
                photographers = PhotographerService._to_photographers(data)
                log_metric("photographers_listed", len(photographers))
                return photographers
        except Exception as e:
            log_exception(e, {"operation": "get_all_photographers"})
            raise

    @staticmethod
    async def search_photographers(api: ApiClient, criteria: PhotographerFilter) -> List[Photographer]:
        """Ask the API to filter; callers still apply filter_photographers as a fallback"""
        try:
            with start_span("search_photographers", attributes={"search": criteria.search or ""}):
                data = await api.get(
                    "/photographers/search",
                    params=criteria.as_query_params(),
                    context="search_photographers"
                )
                return PhotographerService._to_photographers(data)
        except Exception as e:
            log_exception(e, {"operation": "search_photographers"})
            raise

    @staticmethod
    async def get_photographer(api: ApiClient, photographer_id: str) -> Photographer:
        try:
            with start_span("get_photographer", attributes={"photographer_id": photographer_id}):
                data = await api.get(f"/photographers/{photographer_id}", context="get_photographer")
                if not data:
                    ApiError.raise_http_exception(
                        404, ApiError.NOT_FOUND, "Photographer not found", context="get_photographer"
                    )
                return PhotographerService._to_photographer(data)
        except Exception as e:
            log_exception(e, {"operation": "get_photographer", "photographer_id": photographer_id})
            raise

    @staticmethod
    def filter_photographers(photographers: List[Photographer], criteria: PhotographerFilter) -> List[Photographer]:
        """
        Client-side filtering by search term, categories and price range.

        Photographers without categories match any category selection, and
        photographers without a listed price match any price range.
        """
        term = (criteria.search or "").lower()
        selected = {category.lower() for category in criteria.categories}

        def matches_search(p: Photographer) -> bool:
            if not term:
                return True
            return any(term in (value or "").lower() for value in (p.fullName, p.specialty, p.location))

        def matches_category(p: Photographer) -> bool:
            if not selected or not p.categories:
                return True
            return any(category.lower() in selected for category in p.categories)

        def matches_price(p: Photographer) -> bool:
            if not p.price:
                return True
            return criteria.min_price <= p.price <= criteria.max_price

        return [p for p in photographers if matches_search(p) and matches_category(p) and matches_price(p)]

    @staticmethod
    async def update_profile(
        api: ApiClient, session: ClientSession, profile: ProfileUpdate, image: tuple = None
    ) -> Photographer:
        """
        Update the logged-in photographer's profile.

        Args:
            image: optional (filename, content_type, content bytes) for a new profile picture
        """
        try:
            with start_span("update_photographer_profile", attributes={"user_id": session.user_id}):
                changes = profile.dict(exclude_none=True)
                log_event("Update profile started", {"user_id": session.user_id, "fields": ",".join(changes)})
                if image is not None:
                    name, content_type, content = image
                    form = {
                        key: ",".join(value) if isinstance(value, list) else str(value)
                        for key, value in changes.items()
                    }
                    data = await api.put(
                        "/photographers/profile",
                        token=session.token,
                        data=form,
                        files=[("profileImage", (name, content, content_type))],
                        context="update_photographer_profile"
                    )
                else:
                    data = await api.put(
                        "/photographers/profile", token=session.token, json=changes,
                        context="update_photographer_profile"
                    )
                log_event("Profile updated successfully", {"user_id": session.user_id})
                if not data:
                    return await PhotographerService.get_photographer(api, session.user_id)
                return PhotographerService._to_photographer(data)
        except Exception as e:
            log_exception(e, {"operation": "update_photographer_profile", "user_id": session.user_id})
            raise

    @staticmethod
    async def update_availability(api: ApiClient, session: ClientSession, availability: AvailabilityUpdate):
        try:
            with start_span("update_availability", attributes={"user_id": session.user_id}):
                data = await api.put(
                    "/photographers/availability",
                    token=session.token,
                    json=availability.dict(),
                    context="update_availability"
                )
                log_event("Availability updated successfully", {"user_id": session.user_id})
                return data
        except Exception as e:
            log_exception(e, {"operation": "update_availability", "user_id": session.user_id})
            raise
