"""Client action types."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ActionType(StrEnum):
    """Every action the client store understands."""

    SET_ALERT = "SET_ALERT"
    REMOVE_ALERT = "REMOVE_ALERT"
    REGISTER_SUCCESS = "REGISTER_SUCCESS"
    REGISTER_FAIL = "REGISTER_FAIL"
    USER_LOADED = "USER_LOADED"
    AUTH_ERROR = "AUTH_ERROR"
    LOGIN_SUCCESS = "LOGIN_SUCCESS"
    LOGIN_FAIL = "LOGIN_FAIL"
    LOGOUT = "LOGOUT"


@dataclass(frozen=True, slots=True)
class Action:
    """A dispatched action and its payload."""

    type: ActionType
    payload: Any = None
