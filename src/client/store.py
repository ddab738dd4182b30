"""Single store owning the client state."""

from typing import Callable, List, Optional

from client.actions import Action
from client.state import AppState, AuthState, root_reducer
from client.storage import MemoryTokenStorage, TokenStorage

Listener = Callable[[AppState], None]
Reducer = Callable[[AppState, Action], AppState]


class Store:
    """Holds the state, applies reducers and persists the token.

    Reducers stay pure; writing the token to storage happens here, after
    each dispatch, whenever the token changed.
    """

    def __init__(
        self,
        storage: Optional[TokenStorage] = None,
        reducer: Reducer = root_reducer,
        initial_state: Optional[AppState] = None,
    ) -> None:
        self._storage: TokenStorage = storage or MemoryTokenStorage()
        self._reducer = reducer
        self._listeners: List[Listener] = []
        if initial_state is None:
            initial_state = AppState(auth=AuthState(token=self._storage.get_token()))
        self._state = initial_state

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> AppState:
        """Apply an action, persist the token if it changed, notify listeners."""
        previous = self._state
        self._state = self._reducer(previous, action)

        if self._state.auth.token != previous.auth.token:
            if self._state.auth.token:
                self._storage.set_token(self._state.auth.token)
            else:
                self._storage.remove_token()

        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

