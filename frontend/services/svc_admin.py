from typing import List, Optional
from frontend.configuration.monitor import log_event, log_exception, log_metric, start_span
from frontend.models.mod_admin import UserAccount, PhotographerAccount
from frontend.models.mod_auth import ClientSession
from frontend.services.svc_api import ApiClient

class AdminService:
    @staticmethod
    async def get_users(api: ApiClient, session: ClientSession) -> List[UserAccount]:
        try:
            with start_span("admin_get_users"):
                data = await api.get("/admin/users", token=session.token, context="admin_get_users")
                users = [UserAccount(**item) for item in (data or [])]
                log_metric("admin_users", len(users))
                return users
        except Exception as e:
            log_exception(e, {"operation": "admin_get_users"})
            raise

    @staticmethod
    async def get_photographers(api: ApiClient, session: ClientSession) -> List[PhotographerAccount]:
        try:
            with start_span("admin_get_photographers"):
                data = await api.get("/admin/photographers", token=session.token, context="admin_get_photographers")
                photographers = [PhotographerAccount(**item) for item in (data or [])]
                log_metric("admin_photographers", len(photographers))
                return photographers
        except Exception as e:
            log_exception(e, {"operation": "admin_get_photographers"})
            raise

    @staticmethod
    async def delete_user(api: ApiClient, session: ClientSession, user_id: str) -> None:
        try:
            with start_span("admin_delete_user", attributes={"user_id": user_id}):
                await api.delete(f"/admin/users/{user_id}", token=session.token, context="admin_delete_user")
                log_event("User deleted", {"user_id": user_id, "admin_id": session.user_id})
        except Exception as e:
            log_exception(e, {"operation": "admin_delete_user", "user_id": user_id})
            raise

    @staticmethod
    async def delete_photographer(api: ApiClient, session: ClientSession, photographer_id: str) -> None:
        try:
            with start_span("admin_delete_photographer", attributes={"photographer_id": photographer_id}):
                await api.delete(
                    f"/admin/photographers/{photographer_id}",
                    token=session.token,
                    context="admin_delete_photographer"
                )
                log_event("Photographer deleted", {"photographer_id": photographer_id, "admin_id": session.user_id})
        except Exception as e:
            log_exception(e, {"operation": "admin_delete_photographer", "photographer_id": photographer_id})
            raise

    @staticmethod
    def search_accounts(accounts: list, term: Optional[str]) -> list:
        """Match the term against account name and email"""
        if not term:
            return list(accounts)
        needle = term.lower()
        return [
            account for account in accounts
            if needle in account.fullName.lower() or needle in account.email.lower()
        ]
