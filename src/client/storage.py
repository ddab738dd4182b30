"""Durable token storage for the client store."""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class TokenStorage(Protocol):
    """Where the store keeps the auth token between runs."""

    def get_token(self) -> Optional[str]: ...

    def set_token(self, token: str) -> None: ...

    def remove_token(self) -> None: ...


class MemoryTokenStorage:
    """Process-local storage, mostly for tests."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    def get_token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def remove_token(self) -> None:
        self._token = None


class FileTokenStorage:
    """JSON file storage that survives restarts."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def get_token(self) -> Optional[str]:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable token file %s", self._path)
            return None
        token = data.get(TOKEN_KEY) if isinstance(data, dict) else None
        return token if isinstance(token, str) else None

    def set_token(self, token: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps({TOKEN_KEY: token}), encoding="utf-8")

    def remove_token(self) -> None:
        self._path.unlink(missing_ok=True)
