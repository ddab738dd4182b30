"""Async HTTP client whose calls dispatch actions into a Store."""

import uuid
from typing import Any, Optional

import httpx
import structlog

from client.actions import Action, ActionType
from client.state import Alert
from client.store import Store

logger = structlog.get_logger()


def error_messages(response: httpx.Response) -> list[str]:
    """Pull user-facing messages out of an API error response."""
    try:
        body = response.json()
    except ValueError:
        return [response.text or f"Request failed ({response.status_code})"]

    details = body.get("details") if isinstance(body, dict) else None
    if isinstance(details, list):
        messages = [d["message"] for d in details if isinstance(d, dict) and d.get("message")]
        if messages:
            return messages
    if isinstance(body, dict) and body.get("message"):
        return [str(body["message"])]
    return [f"Request failed ({response.status_code})"]


class ApiClient:
    """Action creators for the auth and alert state.

    Each call talks to the API and records the outcome in the store.
    """

    def __init__(
        self,
        store: Store,
        base_url: str = "http://localhost:5000",
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._store = store
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=10.0)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def set_alert(self, msg: str, alert_type: str = "danger") -> str:
        """Show an alert; returns its id."""
        alert = Alert(id=str(uuid.uuid4()), msg=msg, alert_type=alert_type)
        self._store.dispatch(Action(ActionType.SET_ALERT, alert))
        return alert.id

    def remove_alert(self, alert_id: str) -> None:
        self._store.dispatch(Action(ActionType.REMOVE_ALERT, alert_id))

    async def load_user(self) -> bool:
        """Fetch the current user with the stored token."""
        token = self._store.state.auth.token
        if not token:
            self._store.dispatch(Action(ActionType.AUTH_ERROR))
            return False

        response = await self._http.get(
            "/api/auth", headers={"Authorization": f"Bearer {token}"}
        )
        if response.is_success:
            self._store.dispatch(Action(ActionType.USER_LOADED, response.json()))
            return True

        logger.info("load_user_failed", status_code=response.status_code)
        self._store.dispatch(Action(ActionType.AUTH_ERROR))
        return False

    async def register(self, name: str, email: str, password: str) -> bool:
        response = await self._http.post(
            "/api/users",
            json={"name": name, "email": email, "password": password},
        )
        return await self._authenticate(
            response, ActionType.REGISTER_SUCCESS, ActionType.REGISTER_FAIL
        )

    async def login(self, email: str, password: str) -> bool:
        response = await self._http.post(
            "/api/auth",
            json={"email": email, "password": password},
        )
        return await self._authenticate(
            response, ActionType.LOGIN_SUCCESS, ActionType.LOGIN_FAIL
        )

    def logout(self) -> None:
        self._store.dispatch(Action(ActionType.LOGOUT))

    async def _authenticate(
        self, response: httpx.Response, success: ActionType, failure: ActionType
    ) -> bool:
        if response.is_success:
            self._store.dispatch(Action(success, response.json()))
            await self.load_user()
            return True

        for message in error_messages(response):
            self.set_alert(message, "danger")
        self._store.dispatch(Action(failure))
        return False
