"""Client state and the pure reducers that evolve it."""

from dataclasses import asdict, dataclass, field, replace
from typing import Any

from client.actions import Action, ActionType


@dataclass(frozen=True, slots=True)
class Alert:
    """A message shown to the user until removed."""

    id: str
    msg: str
    alert_type: str = "danger"


@dataclass(frozen=True, slots=True)
class AuthState:
    """Authentication state.

    ``is_authenticated`` stays None until the first auth outcome is known.
    """

    token: str | None = None
    is_authenticated: bool | None = None
    loading: bool = True
    user: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class AppState:
    """The whole client state, owned by a single Store."""

    alerts: tuple[Alert, ...] = ()
    auth: AuthState = field(default_factory=AuthState)

    def to_dict(self) -> dict[str, Any]:
        return {
            "alerts": [asdict(alert) for alert in self.alerts],
            "auth": asdict(self.auth),
        }


def alert_reducer(state: tuple[Alert, ...], action: Action) -> tuple[Alert, ...]:
    if action.type == ActionType.SET_ALERT:
        return (*state, action.payload)
    if action.type == ActionType.REMOVE_ALERT:
        return tuple(alert for alert in state if alert.id != action.payload)
    return state


def auth_reducer(state: AuthState, action: Action) -> AuthState:
    if action.type == ActionType.USER_LOADED:
        return replace(state, user=action.payload, is_authenticated=True, loading=False)

    if action.type in (ActionType.REGISTER_SUCCESS, ActionType.LOGIN_SUCCESS):
        return replace(
            state,
            token=action.payload["token"],
            is_authenticated=True,
            loading=False,
        )

    if action.type in (
        ActionType.REGISTER_FAIL,
        ActionType.LOGIN_FAIL,
        ActionType.AUTH_ERROR,
        ActionType.LOGOUT,
    ):
        return replace(
            state,
            token=None,
            is_authenticated=False,
            loading=False,
            user=None,
        )

    return state


def root_reducer(state: AppState, action: Action) -> AppState:
    """Combine the alert and auth reducers."""
    return AppState(
        alerts=alert_reducer(state.alerts, action),
        auth=auth_reducer(state.auth, action),
    )
